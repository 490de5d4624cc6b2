import locale

import pytest

from casemap.utils.case_folding import FALLBACK_LOCALE, case_fold, default_locale, lower_case, normalize_locale_tag


# ---------- Locale tags ----------
@pytest.mark.unit
@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("tr-TR", "tr_TR"),
        ("tr_tr", "tr_TR"),
        ("en_US.UTF-8", "en_US"),
        ("de_DE@euro", "de_DE"),
        ("DE", "de"),
        (" az ", "az"),
    ],
)
def test_normalize_locale_tag(tag, expected):
    assert normalize_locale_tag(tag) == expected


@pytest.mark.unit
@pytest.mark.parametrize("tag", ["", ".UTF-8", "   "])
def test_normalize_locale_tag_rejects_empty(tag):
    with pytest.raises(ValueError):
        normalize_locale_tag(tag)


@pytest.mark.unit
def test_normalize_locale_tag_rejects_non_string():
    with pytest.raises(TypeError):
        normalize_locale_tag(None)


# ---------- Process default ----------
@pytest.mark.unit
def test_default_locale_reads_lc_ctype(monkeypatch):
    monkeypatch.setattr(locale, "getlocale", lambda category=None: ("tr_TR", "UTF-8"))
    assert default_locale() == "tr_TR"


@pytest.mark.unit
@pytest.mark.parametrize("value", [(None, None), ("C", None), ("POSIX", None)])
def test_default_locale_fallback(monkeypatch, value):
    monkeypatch.setattr(locale, "getlocale", lambda category=None: value)
    assert default_locale() == FALLBACK_LOCALE


# ---------- Folding ----------
@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "loc", "expected"),
    [
        ("Content-Type", "en_US", "content-type"),
        ("TITLE", "en_US", "title"),
        ("TITLE", "tr_TR", "tıtle"),
        ("İSTANBUL", "tr", "istanbul"),
        ("İ", "az_AZ", "i"),
        ("İ", "en_US", "i̇"),
        ("Straße", "de_DE", "straße"),
    ],
)
def test_lower_case(text, loc, expected):
    assert lower_case(text, loc) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "loc", "expected"),
    [
        ("Straße", "de_DE", "strasse"),
        ("STRASSE", "de_DE", "strasse"),
        ("TITLE", "tr_TR", "tıtle"),
    ],
)
def test_case_fold(text, loc, expected):
    assert case_fold(text, loc) == expected


@pytest.mark.unit
def test_folding_is_idempotent():
    for fold in (lower_case, case_fold):
        for loc in ("en_US", "tr_TR"):
            once = fold("Mixed-Case İ Key", loc)
            assert fold(once, loc) == once
