"""Documents and editors handlers are inserted into."""

from __future__ import annotations

from .document import Position, TextDocument
from .editing import BufferEditor, DocumentEditor

__all__ = ["BufferEditor", "DocumentEditor", "Position", "TextDocument"]
