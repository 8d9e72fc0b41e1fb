"""Order-preserving asynchronous search over node chains."""

from __future__ import annotations

import asyncio
from enum import StrEnum
from typing import Awaitable, Callable, Sequence

from jsxhandler.editor import Position, TextDocument
from jsxhandler.library import ModuleMatcher
from jsxhandler.navigation import NavigationService
from jsxhandler.syntax import (
    SyntaxKind,
    SyntaxNode,
    TreeProvider,
    resolve_path_at,
)

__all__ = [
    "Direction",
    "NodePredicate",
    "find_ancestor_when",
    "find_parents_when",
    "is_class_extends_runtime_component",
    "is_functional_component",
    "names_runtime_base_class",
]

NodePredicate = Callable[[SyntaxNode], Awaitable[bool]]

_FUNCTION_VALUES = (SyntaxKind.ARROW_FUNCTION, SyntaxKind.FUNCTION_EXPRESSION)
_RUNTIME_BASE_CLASSES = frozenset({"Component", "PureComponent"})


class Direction(StrEnum):
    """Which end of a chain is searched first."""

    INWARD = "inward"
    OUTWARD = "outward"


async def find_ancestor_when(
    chain: Sequence[SyntaxNode],
    predicate: NodePredicate,
    direction: Direction = Direction.OUTWARD,
) -> SyntaxNode | None:
    """Return the first node of ``chain`` satisfying ``predicate``.

    ``OUTWARD`` starts at the innermost node, ``INWARD`` at the root. Every
    predicate runs concurrently and none is cancelled; the winner is picked
    by chain position once all have finished, never by completion order.
    """

    candidates = list(chain)
    if Direction(direction) is Direction.OUTWARD:
        candidates.reverse()

    results = await asyncio.gather(*(predicate(node) for node in candidates))
    for node, matched in zip(candidates, results):
        if matched:
            return node
    return None


async def find_parents_when(
    document: TextDocument,
    position: Position,
    predicate: NodePredicate,
    direction: Direction,
    *,
    provider: TreeProvider,
) -> SyntaxNode | None:
    """Parse ``document`` and search the chain at ``position``."""

    root = provider.parse(document.uri, document.text)
    chain = resolve_path_at(root, document.offset_at(position))
    return await find_ancestor_when(chain, predicate, direction)


async def is_class_extends_runtime_component(
    node: SyntaxNode,
    *,
    document: TextDocument,
    navigation: NavigationService,
    matcher: ModuleMatcher,
) -> bool:
    """Whether ``node`` is a class whose base type comes from the runtime.

    Each heritage expression is looked up concurrently; one expression
    defined inside the runtime module is enough.
    """

    if node.kind is not SyntaxKind.CLASS_DECLARATION:
        return False
    clauses = node.heritage_clauses
    if not clauses:
        return False

    async def defined_in_runtime(expression: SyntaxNode) -> bool:
        definitions = await navigation.find_type_definition(
            document.uri,
            document.position_at(expression.start),
        )
        return any(
            matcher.is_from_library_runtime(definition.path)
            for definition in definitions or ()
        )

    async def clause_in_runtime(expressions: Sequence[SyntaxNode]) -> bool:
        results = await asyncio.gather(
            *(defined_in_runtime(expression) for expression in expressions)
        )
        return any(results)

    results = await asyncio.gather(
        *(clause_in_runtime(expressions) for expressions in clauses)
    )
    return any(results)


def names_runtime_base_class(node: SyntaxNode) -> bool:
    """Syntactic fallback: the class extends ``[React.]Component``.

    Used when no navigation service is available to resolve base types.
    """

    if node.kind is not SyntaxKind.CLASS_DECLARATION:
        return False
    for expressions in node.heritage_clauses:
        for expression in expressions:
            if expression.text.rsplit(".", 1)[-1] in _RUNTIME_BASE_CLASSES:
                return True
    return False


def _is_component_name(name: SyntaxNode | None) -> bool:
    return (
        name is not None
        and name.kind is SyntaxKind.IDENTIFIER
        and name.text[:1].isupper()
    )


def is_functional_component(node: SyntaxNode) -> bool:
    """Function declarations and ``const X = () => ...`` with upper-case names."""

    if node.kind is SyntaxKind.FUNCTION_DECLARATION:
        return _is_component_name(node.name)
    if node.kind is not SyntaxKind.VARIABLE_STATEMENT:
        return False
    for declarator in node.children:
        if declarator.kind is not SyntaxKind.VARIABLE_DECLARATOR:
            continue
        value = declarator.get_field("value")
        if value is not None and value.kind in _FUNCTION_VALUES:
            if _is_component_name(declarator.name):
                return True
    return False
