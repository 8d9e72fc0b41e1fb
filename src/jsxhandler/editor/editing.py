"""Document editor protocol and the in-memory buffer implementation."""

from __future__ import annotations

from typing import Protocol

from jsxhandler.core.logging import Logger, get_logger

from .document import Position, TextDocument

__all__ = ["BufferEditor", "DocumentEditor"]


class DocumentEditor(Protocol):
    """Apply text insertions to a live buffer."""

    async def insert_text(self, position: Position, text: str) -> None:
        """Insert ``text`` at ``position``."""


class BufferEditor:
    """Editor writing straight into a :class:`TextDocument`."""

    def __init__(
        self,
        document: TextDocument,
        *,
        logger: Logger | None = None,
    ) -> None:
        self.document = document
        self._logger = logger or get_logger(__name__, uri=document.uri)

    async def insert_text(self, position: Position, text: str) -> None:
        offset = self.document.offset_at(position)
        if self.document.eol != "\n":
            text = text.replace("\n", self.document.eol)
        self.document.insert(offset, text)
        self._logger.debug(
            "buffer-insert",
            offset=offset,
            length=len(text),
            version=self.document.version,
        )
