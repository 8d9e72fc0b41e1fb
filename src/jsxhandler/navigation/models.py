"""Value types exchanged with navigation services."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from jsxhandler.editor import Position

__all__ = ["Location", "Range", "SymbolInformation"]


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions."""

    start: Position
    end: Position

    @classmethod
    def at(cls, line: int, character: int, length: int = 0) -> "Range":
        return cls(
            Position(line, character),
            Position(line, character + length),
        )

    def contains(self, position: Position) -> bool:
        """Inclusive containment, matching editor hover semantics."""

        return self.start <= position <= self.end


@dataclass(frozen=True, slots=True)
class Location:
    """A span inside a (possibly different) document.

    ``text`` carries the symbol text found at the location when the
    service knows it, e.g. the declared interface name.
    """

    uri: str
    range: Range
    text: str = ""

    @property
    def path(self) -> str:
        """Filesystem path of :attr:`uri`, accepting bare paths too."""

        parsed = urlparse(self.uri)
        if not parsed.scheme:
            return self.uri
        return unquote(parsed.path)


@dataclass(frozen=True, slots=True)
class SymbolInformation:
    """Document symbol as reported by a symbol provider."""

    name: str
    kind: str
    location: Location
    container_name: str | None = None
