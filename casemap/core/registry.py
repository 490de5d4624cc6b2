from __future__ import annotations

from typing import TypeVar

from casemap.core.linked_map import CaseInsensitiveOrderedMap
from casemap.utils.error_handling import ErrorMode

V = TypeVar("V")


class CaseInsensitiveRegistry(CaseInsensitiveOrderedMap[V]):
    """
    Name -> object registry with case-insensitive lookup.

    Features:
    - Names are stored exactly as registered (preserves original casing).
    - All lookups ([], get(), in, del, pop()) are case-insensitive.
    - Re-casing collisions are forbidden to prevent silent overwrites:
      registering "abc" after "ABC" raises a `KeyError`.
    - Re-assigning the exact same name updates the entry in place.

    Example:
        reg = CaseInsensitiveRegistry()
        reg["StandardScaler"] = cls
        reg["MinMaxScaler"] = cls2

        assert reg["standardscaler"] is reg["StandardScaler"]
        assert "minmaxscaler" in reg

    """

    def __init__(self, data=None, **kwargs):
        kwargs.setdefault("on_case_collision", ErrorMode.RAISE)
        super().__init__(**kwargs)
        if data is not None:
            self._put_all(data, depth=1)

    def original_keys(self) -> list[str]:
        """Return names as originally registered, in registration order."""
        return list(self.keys())
