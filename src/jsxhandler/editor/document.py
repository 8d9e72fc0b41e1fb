"""In-memory text documents with line/column and offset conversion."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Position", "TextDocument"]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character location inside a document."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Position must not be negative: {self!r}")


class TextDocument:
    """Document text addressed either by :class:`Position` or flat offset.

    Out-of-range positions and offsets are clamped to the document, the way
    editors treat them.
    """

    def __init__(self, uri: str, text: str) -> None:
        self.uri = uri
        self._text = text
        self._line_starts = self._compute_line_starts(text)
        self.version = 0

    @classmethod
    def from_path(cls, path: Path) -> "TextDocument":
        resolved = path.expanduser().resolve()
        with resolved.open(encoding="utf-8", newline="") as handle:
            return cls(resolved.as_uri(), handle.read())

    @property
    def text(self) -> str:
        return self._text

    @property
    def eol(self) -> str:
        """Line break used by the first line, or LF when there is none."""

        index = self._text.find("\n")
        return "\r\n" if index > 0 and self._text[index - 1] == "\r" else "\n"

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def get_text(self, start: int | None = None, end: int | None = None) -> str:
        return self._text[start:end]

    def line_text(self, line: int) -> str:
        """Return ``line`` without its line break."""

        line = min(max(line, 0), self.line_count - 1)
        start = self._line_starts[line]
        end = (
            self._line_starts[line + 1]
            if line + 1 < self.line_count
            else len(self._text)
        )
        return self._text[start:end].rstrip("\r\n")

    def offset_at(self, position: Position) -> int:
        if position.line >= self.line_count:
            return len(self._text)
        start = self._line_starts[position.line]
        length = len(self.line_text(position.line))
        return start + min(position.character, length)

    def position_at(self, offset: int) -> Position:
        offset = min(max(offset, 0), len(self._text))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])

    def insert(self, offset: int, text: str) -> None:
        """Insert ``text`` at ``offset`` and bump :attr:`version`."""

        offset = min(max(offset, 0), len(self._text))
        self._text = self._text[:offset] + text + self._text[offset:]
        self._line_starts = self._compute_line_starts(self._text)
        self.version += 1

    @staticmethod
    def _compute_line_starts(text: str) -> list[int]:
        starts = [0]
        index = text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = text.find("\n", index + 1)
        return starts
