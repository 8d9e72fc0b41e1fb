"""Compute where handler stubs go and request their insertion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from itertools import dropwhile

from jsxhandler.core.logging import get_logger
from jsxhandler.editor import DocumentEditor, Position, TextDocument
from jsxhandler.syntax import (
    SyntaxKind,
    SyntaxNode,
    TreeProvider,
    contains_offset,
    resolve_path_at,
)

from .compose import Composer, compose_handler_fragment
from .params import FunctionParam

__all__ = [
    "ClassTarget",
    "ComponentShape",
    "FunctionalTarget",
    "HandlerInsertionRequest",
    "InsertionTarget",
    "class_insertion_anchor",
    "functional_insertion_anchor",
    "infer_indent",
    "insert_handler",
    "insert_into_class_component",
    "insert_into_functional_component",
]

_STATEMENT_ANCHORS = (SyntaxKind.VARIABLE_STATEMENT, SyntaxKind.RETURN_STATEMENT)


class ComponentShape(StrEnum):
    CLASS = "class"
    FUNCTIONAL = "functional"


@dataclass(frozen=True, slots=True)
class ClassTarget:
    """A class component declaration."""

    node: SyntaxNode

    @property
    def shape(self) -> ComponentShape:
        return ComponentShape.CLASS


@dataclass(frozen=True, slots=True)
class FunctionalTarget:
    """A function declaration or variable statement holding a component."""

    node: SyntaxNode

    @property
    def shape(self) -> ComponentShape:
        return ComponentShape.FUNCTIONAL


InsertionTarget = ClassTarget | FunctionalTarget


@dataclass(frozen=True, slots=True)
class HandlerInsertionRequest:
    """Everything needed to insert one handler stub.

    ``indent`` of ``None`` copies the indentation of the anchor line.
    """

    target: InsertionTarget
    symbol_position: Position
    full_handler_name: str
    params: tuple[FunctionParam, ...] = ()
    indent: int | None = None


def class_insertion_anchor(
    class_node: SyntaxNode,
    offset: int,
) -> SyntaxNode | None:
    """Return the class member containing ``offset``.

    Member spans start at their full start, so inserting at ``member.pos``
    places text before the member's leading trivia. On a shared boundary the
    later member wins.
    """

    anchor: SyntaxNode | None = None
    for member in class_node.members:
        if contains_offset(offset, member.pos, member.end):
            anchor = member
    return anchor


def functional_insertion_anchor(
    root: SyntaxNode,
    offset: int,
    component: SyntaxNode,
) -> SyntaxNode | None:
    """Return the outermost statement inside ``component`` around ``offset``.

    The component's own node and its ancestors are skipped; the first
    variable statement or return statement below them is the anchor.
    """

    chain = resolve_path_at(root, offset)
    if not any(node.same_span(component) for node in chain):
        return None
    for node in dropwhile(lambda entry: entry.encloses(component), chain):
        if node.kind in _STATEMENT_ANCHORS:
            return node
    return None


def infer_indent(source: str, anchor: SyntaxNode, default: int) -> int:
    """Indentation of the anchor's line, or ``default`` when shared.

    A line holding code before the anchor has no indentation to copy.
    """

    line_start = source.rfind("\n", 0, anchor.start) + 1
    prefix = source[line_start : anchor.start]
    if prefix.strip():
        return default
    return len(prefix.expandtabs(default or 1))


async def insert_into_class_component(
    *,
    editor: DocumentEditor,
    document: TextDocument,
    class_node: SyntaxNode,
    symbol_position: Position,
    full_handler_name: str,
    handler_params: tuple[FunctionParam, ...] | list[FunctionParam] = (),
    indent: int | None = None,
    composer: Composer = compose_handler_fragment,
    default_indent: int = 2,
) -> Position | None:
    """Insert a handler before the member enclosing ``symbol_position``."""

    member = class_insertion_anchor(class_node, document.offset_at(symbol_position))
    if member is None:
        get_logger(__name__).debug("class-anchor-missing", uri=document.uri)
        return None

    if indent is None:
        indent = infer_indent(document.text, member, default_indent)
    insert_at = document.position_at(member.pos)
    await editor.insert_text(
        insert_at,
        composer(
            full_handler_name,
            handler_params,
            indent,
            ComponentShape.CLASS.value,
        ),
    )
    return insert_at


async def insert_into_functional_component(
    *,
    editor: DocumentEditor,
    document: TextDocument,
    functional_node: SyntaxNode,
    symbol_position: Position,
    full_handler_name: str,
    provider: TreeProvider,
    handler_params: tuple[FunctionParam, ...] | list[FunctionParam] = (),
    indent: int | None = None,
    composer: Composer = compose_handler_fragment,
    default_indent: int = 2,
) -> Position | None:
    """Insert a handler before the statement enclosing ``symbol_position``."""

    root = provider.parse(document.uri, document.text)
    statement = functional_insertion_anchor(
        root,
        document.offset_at(symbol_position),
        functional_node,
    )
    if statement is None:
        get_logger(__name__).debug("functional-anchor-missing", uri=document.uri)
        return None

    if indent is None:
        indent = infer_indent(document.text, statement, default_indent)
    insert_at = document.position_at(statement.pos)
    await editor.insert_text(
        insert_at,
        composer(
            full_handler_name,
            handler_params,
            indent,
            ComponentShape.FUNCTIONAL.value,
        ),
    )
    return insert_at


async def insert_handler(
    request: HandlerInsertionRequest,
    *,
    editor: DocumentEditor,
    document: TextDocument,
    provider: TreeProvider,
    composer: Composer = compose_handler_fragment,
    default_indent: int = 2,
) -> Position | None:
    """Dispatch ``request`` on its target shape."""

    if isinstance(request.target, ClassTarget):
        return await insert_into_class_component(
            editor=editor,
            document=document,
            class_node=request.target.node,
            symbol_position=request.symbol_position,
            full_handler_name=request.full_handler_name,
            handler_params=request.params,
            indent=request.indent,
            composer=composer,
            default_indent=default_indent,
        )
    return await insert_into_functional_component(
        editor=editor,
        document=document,
        functional_node=request.target.node,
        symbol_position=request.symbol_position,
        full_handler_name=request.full_handler_name,
        provider=provider,
        handler_params=request.params,
        indent=request.indent,
        composer=composer,
        default_indent=default_indent,
    )
