from casemap.core.linked_map import CaseInsensitiveOrderedMap
from casemap.core.registry import CaseInsensitiveRegistry
from casemap.core.folders import register_folder, resolve_folder
from casemap.utils.error_handling import ErrorMode

__version__ = "0.1.0"

__all__ = [
    "CaseInsensitiveOrderedMap",
    "CaseInsensitiveRegistry",
    "ErrorMode",
    "register_folder",
    "resolve_folder",
]
