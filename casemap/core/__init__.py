from .linked_map import CaseInsensitiveOrderedMap
from .registry import CaseInsensitiveRegistry
from .folders import FOLDER_REGISTRY, register_folder, resolve_folder

__all__ = [
    "FOLDER_REGISTRY",
    "CaseInsensitiveOrderedMap",
    "CaseInsensitiveRegistry",
    "register_folder",
    "resolve_folder",
]
