from __future__ import annotations

import locale as _locale

FALLBACK_LOCALE = "en_US"

# Languages whose dotted/dotless I pair lowercases differently
_TURKIC_LANGUAGES = frozenset({"tr", "az"})


def normalize_locale_tag(tag: str) -> str:
    """
    Normalize a locale identifier to ``language[_REGION]`` form.

    Accepts BCP-47 style tags (``"tr-TR"``), POSIX names with an encoding
    or modifier (``"tr_TR.UTF-8"``, ``"de_DE@euro"``) and bare languages.

    Examples:
        >>> normalize_locale_tag("tr-TR")
        'tr_TR'
        >>> normalize_locale_tag("en_us.UTF-8")
        'en_US'
        >>> normalize_locale_tag("DE")
        'de'

    """
    if not isinstance(tag, str):
        msg = f"Locale tag must be a string, got {type(tag)}"
        raise TypeError(msg)

    base = tag.split(".", 1)[0].split("@", 1)[0].replace("-", "_").strip()
    if not base:
        msg = f"Invalid locale tag: {tag!r}"
        raise ValueError(msg)

    language, _, region = base.partition("_")
    if region:
        return f"{language.lower()}_{region.upper()}"
    return language.lower()


def default_locale() -> str:
    """Return the process-wide default locale tag, read from ``LC_CTYPE``."""
    try:
        tag = _locale.getlocale(_locale.LC_CTYPE)[0]
    except ValueError:
        tag = None

    if not tag or tag.upper() in {"C", "POSIX"}:
        return FALLBACK_LOCALE
    return normalize_locale_tag(tag)


def _language(locale: str) -> str:
    return locale.partition("_")[0].lower()


def _turkic_dotted_i(text: str) -> str:
    # Combining dot above after "I" is absorbed, matching the dotted capital I
    return text.replace("I\u0307", "i").replace("\u0130", "i").replace("I", "\u0131")


def lower_case(text: str, locale: str) -> str:
    """
    Lowercase `text` according to the rules of `locale`.

    Args:
        text (str): Text to lowercase.
        locale (str): Normalized locale tag (see :func:`normalize_locale_tag`).

    Returns:
        str: The lowercased text.

    Examples:
        >>> lower_case("TITLE", "en_US")
        'title'
        >>> lower_case("TITLE", "tr_TR")
        'tıtle'

    """
    if _language(locale) in _TURKIC_LANGUAGES:
        text = _turkic_dotted_i(text)
    return text.lower()


def case_fold(text: str, locale: str) -> str:
    """
    Apply full Unicode case folding to `text`.

    Unlike :func:`lower_case`, this also folds characters such as the
    German sharp s (``"Straße"`` and ``"STRASSE"`` fold to the same key).
    """
    if _language(locale) in _TURKIC_LANGUAGES:
        text = _turkic_dotted_i(text)
    return text.casefold()
