from __future__ import annotations

from collections.abc import Callable

from casemap.core.registry import CaseInsensitiveRegistry
from casemap.utils.case_folding import case_fold, lower_case

FOLDER_REGISTRY: CaseInsensitiveRegistry[Callable[[str, str], str]] = CaseInsensitiveRegistry(locale="en_US", folder=lower_case)

DEFAULT_FOLDER = "lower"


def register_folder(name: str, fn: Callable[[str, str], str], *, overwrite: bool = False) -> None:
    """
    Register a named key folding strategy.

    Args:
        name (str): Name used to select the strategy (case-insensitive).
        fn (Callable[[str, str], str]): Pure function ``fold(text, locale) -> str``.
        overwrite (bool): Replace an existing strategy with the same name.

    """
    if not callable(fn):
        msg = f"Folder '{name}' must be callable, got {type(fn)}"
        raise TypeError(msg)

    if name in FOLDER_REGISTRY:
        if not overwrite:
            msg = f"Folder '{FOLDER_REGISTRY.get_original_key(name)}' is already registered. Use `overwrite=True` to replace it."
            raise KeyError(msg)
        del FOLDER_REGISTRY[name]
    FOLDER_REGISTRY[name] = fn


def resolve_folder(folder: str | Callable[[str, str], str] | None) -> Callable[[str, str], str]:
    """Resolve a folder name or callable to a folding function (None selects the default)."""
    if folder is None:
        folder = DEFAULT_FOLDER

    if isinstance(folder, str):
        fn = FOLDER_REGISTRY.get(folder)
        if fn is None:
            msg = f"Unknown folder '{folder}'. Available: {FOLDER_REGISTRY.original_keys()}"
            raise KeyError(msg)
        return fn

    if callable(folder):
        return folder

    msg = f"`folder` must be a registered name or a callable, got {type(folder)}"
    raise TypeError(msg)


register_folder("lower", lower_case)
register_folder("casefold", case_fold)
