"""UI library module matching and component naming."""

from __future__ import annotations

from .matching import LibraryMatch, LibraryModuleMatcher, ModuleMatcher
from .names import ComponentNameResolver, folder_to_component

__all__ = [
    "ComponentNameResolver",
    "LibraryMatch",
    "LibraryModuleMatcher",
    "ModuleMatcher",
    "folder_to_component",
]
