"""Shared pytest fixtures for jsxhandler tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from jsxhandler.core.config import AppConfig, ParserLanguage
from jsxhandler.syntax import SyntaxKind, SyntaxNode, TreeSitterProvider

NodeFactory = Callable[..., SyntaxNode]


def _clear_root_handlers() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Ensure each test runs with a clean logging configuration."""

    _clear_root_handlers()
    yield
    _clear_root_handlers()


@pytest.fixture()
def provider() -> TreeSitterProvider:
    """Return a TSX provider, skipping when the grammar is unavailable."""

    pytest.importorskip("tree_sitter")
    pytest.importorskip("tree_sitter_typescript")
    return TreeSitterProvider(language=ParserLanguage.TSX)


@pytest.fixture()
def declaration_provider() -> TreeSitterProvider:
    pytest.importorskip("tree_sitter")
    pytest.importorskip("tree_sitter_typescript")
    return TreeSitterProvider(language=ParserLanguage.TYPESCRIPT)


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture()
def make_node() -> NodeFactory:
    """Build hand-made nodes over a shared source string.

    ``make_node("a", 0, 5, child, ...)`` creates an ``OTHER`` node spanning
    ``[0, 5]`` with ``type`` set to ``"a"``; ``kind`` and ``start`` may be
    passed as keywords.
    """

    def factory(
        label: str,
        pos: int,
        end: int,
        *children: SyntaxNode,
        kind: SyntaxKind = SyntaxKind.OTHER,
        start: int | None = None,
        source: str = " " * 64,
    ) -> SyntaxNode:
        return SyntaxNode(
            kind=kind,
            type=label,
            pos=pos,
            start=pos if start is None else start,
            end=end,
            source=source,
            children=tuple(children),
        )

    return factory
