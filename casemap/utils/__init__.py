from .case_folding import case_fold, default_locale, lower_case, normalize_locale_tag
from .error_handling import ErrorMode

__all__ = [
    "ErrorMode",
    "case_fold",
    "default_locale",
    "lower_case",
    "normalize_locale_tag",
]
