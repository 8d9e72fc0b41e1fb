"""Resolve the chain of nodes whose spans contain an offset."""

from __future__ import annotations

from .nodes import NodeChain, SyntaxNode
from .visitor import traverse

__all__ = ["contains_offset", "resolve_path_at"]


def contains_offset(offset: int, start_or_end: int, end_or_start: int) -> bool:
    """Return ``True`` when ``offset`` lies within the bounds, inclusively.

    Bounds may be given in either order.

    Example:
        >>> contains_offset(3, 5, 3), contains_offset(6, 3, 5)
        (True, False)
    """

    start, end = sorted((start_or_end, end_or_start))
    return start <= offset <= end


def resolve_path_at(root: SyntaxNode, offset: int) -> NodeChain:
    """Return the nodes containing ``offset``, outermost first.

    Both span ends count as inside, so an offset on the boundary shared by
    two siblings matches both; the later sibling wins and whatever was
    collected under the earlier one is dropped, keeping every entry the
    parent of the next.
    """

    chain: list[SyntaxNode] = []
    depth = 0

    def enter(node: SyntaxNode) -> bool:
        nonlocal depth
        level = depth
        depth += 1
        if not contains_offset(offset, node.pos, node.end):
            return False
        del chain[level:]
        chain.append(node)
        return True

    def leave(node: SyntaxNode) -> None:
        nonlocal depth
        depth -= 1

    traverse(root, on_enter=enter, on_leave=leave)
    return tuple(chain)
