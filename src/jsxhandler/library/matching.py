"""Recognise UI library and runtime modules from definition paths."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol

from jsxhandler.core.config import LibrarySettings

__all__ = ["LibraryMatch", "LibraryModuleMatcher", "ModuleMatcher"]


@dataclass(frozen=True, slots=True)
class LibraryMatch:
    """Where inside the UI library a definition lives."""

    library: str
    module_dir: str
    component_folder: str


class ModuleMatcher(Protocol):
    def match_library_module(self, file_path: str) -> LibraryMatch | None:
        """Return the component folder of a UI library file, if any."""

    def is_from_library_runtime(self, file_path: str) -> bool:
        """Return ``True`` for files of the component runtime (React)."""


def _alternation(values: tuple[str, ...]) -> str:
    return "|".join(re.escape(value) for value in values)


class LibraryModuleMatcher:
    """Path-based matcher for ``node_modules/<library>/<dir>/<folder>/``.

    Example:
        >>> matcher = LibraryModuleMatcher(LibrarySettings())
        >>> matcher.match_library_module(
        ...     "/app/node_modules/antd/lib/date-picker/index.d.ts"
        ... ).component_folder
        'date-picker'
        >>> matcher.is_from_library_runtime(
        ...     "/app/node_modules/@types/react/index.d.ts"
        ... )
        True
    """

    def __init__(self, settings: LibrarySettings) -> None:
        self.settings = settings
        self._library_pattern = re.compile(
            rf"(?:^|/)node_modules/{re.escape(settings.name)}/"
            rf"(?P<dir>{_alternation(settings.module_dirs)})/"
            r"(?P<folder>[^/]+)/"
        )
        self._runtime_pattern = re.compile(
            rf"(?:^|/)node_modules/(?:{_alternation(settings.runtime_modules)})/"
        )

    @staticmethod
    def _normalize(file_path: str) -> str:
        return file_path.replace("\\", "/")

    def match_library_module(self, file_path: str) -> LibraryMatch | None:
        found = self._library_pattern.search(self._normalize(file_path))
        if found is None:
            return None
        return LibraryMatch(
            library=self.settings.name,
            module_dir=found.group("dir"),
            component_folder=found.group("folder"),
        )

    def is_from_library_runtime(self, file_path: str) -> bool:
        return self._runtime_pattern.search(self._normalize(file_path)) is not None
