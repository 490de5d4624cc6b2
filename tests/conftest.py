import pytest

from casemap import CaseInsensitiveOrderedMap


# ==========================================================
# Map fixtures
# ==========================================================
@pytest.fixture
def headers() -> CaseInsensitiveOrderedMap:
    """A small header-like map with mixed-case keys and a fixed locale."""
    return CaseInsensitiveOrderedMap(
        [
            ("Content-Type", "text/html"),
            ("Accept", "*/*"),
            ("X-Request-ID", "abc123"),
        ],
        locale="en_US",
    )


@pytest.fixture
def empty_map() -> CaseInsensitiveOrderedMap:
    return CaseInsensitiveOrderedMap(locale="en_US")
