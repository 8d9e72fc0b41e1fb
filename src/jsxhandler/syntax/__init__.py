"""Syntax tree model, provider and position resolution."""

from __future__ import annotations

from .errors import SyntaxTreeError, TreeProviderError
from .nodes import NodeChain, SyntaxKind, SyntaxNode
from .provider import TreeProvider, TreeSitterProvider
from .resolver import contains_offset, resolve_path_at
from .visitor import traverse, traverse_with_parents

__all__ = [
    "NodeChain",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxTreeError",
    "TreeProvider",
    "TreeProviderError",
    "TreeSitterProvider",
    "contains_offset",
    "resolve_path_at",
    "traverse",
    "traverse_with_parents",
]
