"""Exceptions raised by the syntax layer."""

from __future__ import annotations


class SyntaxTreeError(RuntimeError):
    """Base error for syntax tree failures."""


class TreeProviderError(SyntaxTreeError):
    """Raised when the tree provider cannot produce a tree."""


__all__ = ["SyntaxTreeError", "TreeProviderError"]
