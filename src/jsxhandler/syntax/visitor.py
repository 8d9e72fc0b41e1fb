"""Depth-first traversal over :class:`SyntaxNode` trees."""

from __future__ import annotations

from typing import Callable, Sequence

from .nodes import SyntaxNode

__all__ = ["traverse", "traverse_with_parents"]

EnterHook = Callable[[SyntaxNode], bool]
LeaveHook = Callable[[SyntaxNode], None]
ParentVisitor = Callable[[SyntaxNode, Sequence[SyntaxNode]], "bool | None"]


def _always(node: SyntaxNode) -> bool:
    return True


def _noop(node: SyntaxNode) -> None:
    return None


def traverse(
    root: SyntaxNode,
    *,
    on_enter: EnterHook | None = None,
    on_leave: LeaveHook | None = None,
) -> None:
    """Walk ``root`` pre-order, depth first.

    ``on_enter`` returning a falsy value skips the node's children; the
    node's ``on_leave`` hook still fires. An explicit stack keeps deep
    trees clear of the interpreter recursion limit.
    """

    enter = on_enter or _always
    leave = on_leave or _noop

    stack: list[tuple[SyntaxNode, bool]] = [(root, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            leave(node)
            continue
        descend = enter(node)
        stack.append((node, True))
        if descend:
            stack.extend((child, False) for child in reversed(node.children))


def traverse_with_parents(root: SyntaxNode, visitor: ParentVisitor) -> None:
    """Call ``visitor(node, ancestors)`` for every node under ``root``.

    ``ancestors`` runs from ``root`` down to and including ``node``. A
    visitor returning ``False`` prunes that subtree.
    """

    ancestors: list[SyntaxNode] = []

    def enter(node: SyntaxNode) -> bool:
        ancestors.append(node)
        return visitor(node, tuple(ancestors)) is not False

    def leave(node: SyntaxNode) -> None:
        ancestors.pop()

    traverse(root, on_enter=enter, on_leave=leave)
