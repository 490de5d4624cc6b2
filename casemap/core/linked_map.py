from __future__ import annotations

import warnings
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from typing_extensions import Self

from casemap.utils.case_folding import default_locale, normalize_locale_tag
from casemap.utils.error_handling import ErrorMode
from casemap.utils.representation.summary import Summarizable

V = TypeVar("V")

Folder = Callable[[str, str], str]
EvictionPolicy = Callable[["CaseInsensitiveOrderedMap", tuple[str, Any]], bool]

_MISSING = object()


class CaseInsensitiveOrderedMap(MutableMapping[str, V], Summarizable, Generic[V]):
    """
    Ordered mapping with case-insensitive string keys.

    Description:
        Keys keep their original casing and insertion order for iteration,
        display and equality, while `[]`, `get()`, `in`, `del` and `pop()`
        accept any casing of a stored key.

        Two dicts are kept in lockstep:
          - `_backing`: original-case key -> value (insertion ordered)
          - `_index`:   normalized key -> original-case key held in `_backing`

        Every normalized key in `_index` resolves to exactly one key of
        `_backing` and vice versa. Storing a key that differs only in case
        from an existing one replaces the old casing; the entry is then
        moved to the end of the iteration order. Re-storing the exact same
        casing updates the value in place.

        Non-string keys are never stored and never match.

    Args:
        data (Mapping[str, V] | Iterable[tuple[str, V]], optional):
            Initial entries, applied in order via :meth:`put_all`.
        locale (str, optional):
            Locale tag used for case folding (e.g. ``"tr_TR"``). Defaults to
            the process locale at construction time. Fixed afterwards.
        folder (str | Callable[[str, str], str], optional):
            Folding strategy, either a registered name (``"lower"``,
            ``"casefold"``) or a callable ``fold(text, locale) -> str``.
            Defaults to locale-aware lowercasing.
        on_case_collision (ErrorMode | str, optional):
            What to do when a key is stored under a new casing of an existing
            key. ``"ignore"`` (default) adopts the new casing, ``"warn"`` also
            emits a `UserWarning`, ``"raise"`` rejects it with a `KeyError`.
        max_size (int, optional):
            Evict the eldest entry once the map holds more than `max_size`
            entries. Ignored if `evict_eldest` is given.
        evict_eldest (Callable, optional):
            Predicate ``(mapping, (key, value)) -> bool`` consulted with the
            eldest entry after each insertion of a new key.

    Example:
        >>> headers = CaseInsensitiveOrderedMap({"Content-Type": "text/html"})
        >>> headers["content-type"]
        'text/html'
        >>> headers["CONTENT-TYPE"] = "text/plain"
        >>> list(headers)
        ['CONTENT-TYPE']

    """

    def __init__(
        self,
        data: Mapping[str, V] | Iterable[tuple[str, V]] | None = None,
        *,
        locale: str | None = None,
        folder: str | Folder | None = None,
        on_case_collision: ErrorMode | str = ErrorMode.IGNORE,
        max_size: int | None = None,
        evict_eldest: EvictionPolicy | None = None,
    ):
        if max_size is not None:
            if isinstance(max_size, bool) or not isinstance(max_size, int):
                msg = f"`max_size` must be an integer, got {type(max_size)}"
                raise TypeError(msg)
            if max_size < 0:
                msg = f"`max_size` must be non-negative. Received: {max_size}"
                raise ValueError(msg)

        self._locale: str = default_locale() if locale is None else normalize_locale_tag(locale)
        if callable(folder):
            self._folder: Folder = folder
        else:
            from casemap.core.folders import resolve_folder

            self._folder = resolve_folder(folder)
        self._on_case_collision = ErrorMode(on_case_collision)
        self._max_size = max_size
        self._evict_eldest = evict_eldest

        self._backing: dict[str, V] = {}
        self._index: dict[str, str] = {}

        if data is not None:
            self._put_all(data, depth=1)

    # ==========================================
    # Key normalization
    # ==========================================
    @property
    def locale(self) -> str:
        """Locale tag used for case-insensitive key conversion."""
        return self._locale

    @property
    def on_case_collision(self) -> ErrorMode:
        return self._on_case_collision

    @property
    def max_size(self) -> int | None:
        return self._max_size

    def convert_key(self, key: str) -> str:
        """
        Convert a user-supplied key to its case-insensitive lookup form.

        The default implementation applies this map's folder under its
        locale. Subclasses may override it for other folding rules; the
        result must depend on `key` alone.
        """
        return self._folder(key, self._locale)

    def get_original_key(self, key: Any) -> str | None:
        """Return the stored original-case key matching `key`, or None."""
        if not isinstance(key, str):
            return None
        return self._index.get(self.convert_key(key))

    # ==========================================
    # Insertion
    # ==========================================
    def put(self, key: str, value: V) -> V | None:
        """
        Store `value` under `key`, returning the previously stored value.

        The previous value is the one held by any casing of `key`; None is
        returned if the key was absent.

        Raises:
            TypeError: If `key` is not a string.
            KeyError: If `key` re-cases an existing key and the collision
                mode is ``"raise"``.

        """
        return self._put(key, value, depth=1)

    def _put(self, key: str, value: V, *, depth: int) -> V | None:
        # `depth`: library frames between this call and the caller's code
        if not isinstance(key, str):
            msg = f"Keys must be strings, got {type(key)}"
            raise TypeError(msg)

        norm = self.convert_key(key)
        old_key = self._index.get(norm)

        if old_key is None:
            previous = None
            appended = True
        elif old_key == key:
            previous = self._backing[old_key]
            appended = False
        else:
            self._handle_case_collision(key=key, old_key=old_key, stacklevel=depth + 3)
            previous = self._backing.pop(old_key)
            appended = True

        self._index[norm] = key
        self._backing[key] = value

        if appended:
            self._evict_eldest_if_needed()
        return previous

    def put_all(self, entries: Mapping[str, V] | Iterable[tuple[str, V]]) -> None:
        """Store every (key, value) pair of `entries`, in order."""
        self._put_all(entries, depth=1)

    def _put_all(self, entries: Mapping[str, V] | Iterable[tuple[str, V]], *, depth: int) -> None:
        if isinstance(entries, Mapping):
            if not entries:
                return
            entries = entries.items()
        for key, value in entries:
            self._put(key, value, depth=depth + 1)

    @staticmethod
    def _update_pairs(other) -> Mapping[str, V] | Iterable[tuple[str, V]]:
        if isinstance(other, Mapping) or not hasattr(other, "keys"):
            return other
        return ((k, other[k]) for k in other.keys())

    def update(self, other=(), /, **kwargs) -> None:
        """Update from a mapping or iterable of pairs, then from `kwargs`, like `dict.update`."""
        self._put_all(self._update_pairs(other), depth=1)
        if kwargs:
            self._put_all(kwargs, depth=1)

    def __setitem__(self, key: str, value: V) -> None:
        self._put(key, value, depth=1)

    def _handle_case_collision(self, *, key: str, old_key: str, stacklevel: int) -> None:
        if self._on_case_collision == ErrorMode.IGNORE:
            return
        msg = f"Key '{key}' collides with existing key '{old_key}' (same key ignoring case)"
        if self._on_case_collision == ErrorMode.RAISE:
            raise KeyError(msg)
        warnings.warn(f"{msg}. Replacing '{old_key}' with '{key}'.", category=UserWarning, stacklevel=stacklevel)

    # ==========================================
    # Eviction
    # ==========================================
    def should_evict_eldest(self, key: str, value: V) -> bool:
        """
        Whether the eldest entry should be evicted after an insertion.

        Consults the `evict_eldest` predicate if one was given, otherwise
        evicts once the map holds more than `max_size` entries. Never evicts
        by default.
        """
        if self._evict_eldest is not None:
            return bool(self._evict_eldest(self, (key, value)))
        if self._max_size is not None:
            return len(self._backing) > self._max_size
        return False

    def _evict_eldest_if_needed(self) -> None:
        eldest = next(iter(self._backing))
        if self.should_evict_eldest(eldest, self._backing[eldest]):
            del self._index[self.convert_key(eldest)]
            del self._backing[eldest]

    # ==========================================
    # Lookup
    # ==========================================
    def __getitem__(self, key: str) -> V:
        orig = self.get_original_key(key)
        if orig is None:
            raise KeyError(key)
        return self._backing[orig]

    def get(self, key: str, default: V | None = None) -> V | None:
        orig = self.get_original_key(key)
        if orig is None:
            return default
        return self._backing[orig]

    def __contains__(self, key: object) -> bool:
        return self.get_original_key(key) is not None

    def contains_key(self, key: Any) -> bool:
        return key in self

    def contains_value(self, value: Any) -> bool:
        return value in self._backing.values()

    # ==========================================
    # Removal
    # ==========================================
    def remove(self, key: Any) -> V | None:
        """Remove `key` (any casing) and return its value, or None if absent."""
        return self.pop(key, None)

    def pop(self, key: Any, default: Any = _MISSING) -> V:
        if isinstance(key, str):
            orig = self._index.pop(self.convert_key(key), None)
            if orig is not None:
                return self._backing.pop(orig)
        if default is _MISSING:
            raise KeyError(key)
        return default

    def __delitem__(self, key: str) -> None:
        self.pop(key)

    def popitem(self) -> tuple[str, V]:
        """Remove and return the most recently inserted (key, value) pair, like `dict.popitem`."""
        if not self._backing:
            msg = "popitem(): mapping is empty"
            raise KeyError(msg)
        key = next(reversed(self._backing))
        return key, self.pop(key)

    def clear(self) -> None:
        self._index.clear()
        self._backing.clear()

    # ==========================================
    # Iteration & views
    # ==========================================
    def __iter__(self) -> Iterator[str]:
        return iter(self._backing)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._backing)

    def __len__(self) -> int:
        return len(self._backing)

    # ==========================================
    # Copying
    # ==========================================
    def copy(self) -> Self:
        """Return a copy with independent key maps; values are shared, not copied."""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._backing = dict(self._backing)
        clone._index = dict(self._index)
        return clone

    __copy__ = copy

    def __or__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        merged = self.copy()
        merged._put_all(other, depth=1)
        return merged

    def __ror__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        merged = self.copy()
        merged.clear()
        merged._put_all(other, depth=1)
        merged._put_all(self, depth=1)
        return merged

    def __ior__(self, other):
        self._put_all(self._update_pairs(other), depth=1)
        return self

    # ==========================================
    # Comparison & representation
    # ==========================================
    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if isinstance(other, CaseInsensitiveOrderedMap):
            return self._backing == other._backing
        if isinstance(other, Mapping):
            return self._backing == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return str(self._backing)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._backing!r})"

    def _summary_rows(self) -> list[tuple]:
        entries = [(key, repr(value)) for key, value in self._backing.items()]
        return [
            ("locale", self._locale),
            ("size", str(len(self._backing))),
            ("on_case_collision", self._on_case_collision.value),
            ("max_size", "custom policy" if self._evict_eldest is not None else str(self._max_size)),
            ("entries", entries or "(none)"),
        ]
