"""Parser-independent syntax node model.

Nodes carry two starts: ``pos`` is the *full* start, which includes any
leading whitespace and comments between the previous sibling token and the
node, while ``start`` points at the first significant character. All offsets
are character offsets into the document string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping

__all__ = [
    "NodeChain",
    "SyntaxKind",
    "SyntaxNode",
]


class SyntaxKind(StrEnum):
    """Node classifications the handler logic distinguishes."""

    SOURCE_FILE = "source_file"
    CLASS_DECLARATION = "class_declaration"
    FUNCTION_DECLARATION = "function_declaration"
    VARIABLE_STATEMENT = "variable_statement"
    VARIABLE_DECLARATOR = "variable_declarator"
    RETURN_STATEMENT = "return_statement"
    ARROW_FUNCTION = "arrow_function"
    FUNCTION_EXPRESSION = "function_expression"
    HERITAGE_CLAUSE = "heritage_clause"
    JSX_ELEMENT = "jsx_element"
    JSX_OPENING_ELEMENT = "jsx_opening_element"
    JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
    JSX_ATTRIBUTES = "jsx_attributes"
    JSX_ATTRIBUTE = "jsx_attribute"
    IDENTIFIER = "identifier"
    TYPE_ALIAS = "type_alias"
    TYPE_LITERAL = "type_literal"
    PROPERTY_SIGNATURE = "property_signature"
    FUNCTION_TYPE = "function_type"
    UNION_TYPE = "union_type"
    PARENTHESIZED_TYPE = "parenthesized_type"
    PARAMETER = "parameter"
    OTHER = "other"


@dataclass(frozen=True, slots=True, eq=False)
class SyntaxNode:
    """A node of a parsed document.

    Nodes compare by identity; two parses of the same text yield distinct
    nodes. Use :meth:`same_span` to relate nodes across trees.
    """

    kind: SyntaxKind
    type: str
    pos: int
    start: int
    end: int
    source: str = field(repr=False)
    children: tuple["SyntaxNode", ...] = ()
    fields: Mapping[str, tuple["SyntaxNode", ...]] = field(
        default_factory=dict, repr=False
    )

    @property
    def text(self) -> str:
        """Source text of the node, without leading trivia."""

        return self.source[self.start : self.end]

    @property
    def full_text(self) -> str:
        return self.source[self.pos : self.end]

    def get_field(self, name: str) -> "SyntaxNode | None":
        nodes = self.fields.get(name, ())
        return nodes[0] if nodes else None

    def get_fields(self, name: str) -> tuple["SyntaxNode", ...]:
        return tuple(self.fields.get(name, ()))

    def same_span(self, other: "SyntaxNode") -> bool:
        return (
            self.kind is other.kind
            and self.pos == other.pos
            and self.end == other.end
        )

    def encloses(self, other: "SyntaxNode") -> bool:
        """Return ``True`` when ``other`` lies within this node's span."""

        return self.pos <= other.pos and other.end <= self.end

    # ------------------------------------------------------------------
    # Kind-specific accessors
    # ------------------------------------------------------------------
    @property
    def name(self) -> "SyntaxNode | None":
        return self.get_field("name")

    @property
    def tag_name(self) -> "SyntaxNode | None":
        """Tag name of a JSX opening or self-closing element."""

        if self.kind not in (
            SyntaxKind.JSX_OPENING_ELEMENT,
            SyntaxKind.JSX_SELF_CLOSING_ELEMENT,
        ):
            return None
        return self.get_field("name")

    @property
    def members(self) -> tuple["SyntaxNode", ...]:
        """Class members in declaration order."""

        if self.kind is not SyntaxKind.CLASS_DECLARATION:
            return ()
        body = self.get_field("body")
        return body.children if body is not None else ()

    @property
    def heritage_clauses(self) -> tuple[tuple["SyntaxNode", ...], ...]:
        """Base-type expressions of each ``extends``/``implements`` clause."""

        if self.kind is not SyntaxKind.CLASS_DECLARATION:
            return ()
        clauses: list[tuple[SyntaxNode, ...]] = []
        for child in self.children:
            if child.kind is not SyntaxKind.HERITAGE_CLAUSE:
                continue
            for clause in child.children:
                if clause.type == "extends_clause":
                    expressions = clause.get_fields("value")
                else:
                    expressions = tuple(
                        node
                        for node in clause.children
                        if node.type != "type_arguments"
                    )
                if expressions:
                    clauses.append(expressions)
        return tuple(clauses)

    @property
    def signature_type(self) -> "SyntaxNode | None":
        """Declared type of a property signature, unwrapped from ``: T``."""

        if self.kind is not SyntaxKind.PROPERTY_SIGNATURE:
            return None
        annotation = self.get_field("type")
        if annotation is None:
            return None
        if annotation.type == "type_annotation":
            return annotation.children[0] if annotation.children else None
        return annotation

    @property
    def parameters(self) -> tuple["SyntaxNode", ...]:
        """Parameter nodes of a function type, in declared order."""

        if self.kind is not SyntaxKind.FUNCTION_TYPE:
            return ()
        params = self.get_field("parameters")
        if params is None:
            return ()
        return tuple(
            child for child in params.children
            if child.kind is SyntaxKind.PARAMETER
        )

    @property
    def parameter_name(self) -> "SyntaxNode | None":
        """Binding of a parameter; rest parameters yield the bound name."""

        if self.kind is not SyntaxKind.PARAMETER:
            return None
        pattern = self.get_field("pattern")
        if pattern is not None and pattern.type == "rest_pattern":
            if pattern.children:
                return pattern.children[0]
        return pattern

    @property
    def union_members(self) -> tuple["SyntaxNode", ...]:
        """Flattened members of a (possibly nested) union type."""

        if self.kind is not SyntaxKind.UNION_TYPE:
            return ()
        members: list[SyntaxNode] = []
        stack = list(reversed(self.children))
        while stack:
            child = stack.pop()
            if child.kind is SyntaxKind.UNION_TYPE:
                stack.extend(reversed(child.children))
            else:
                members.append(child)
        return tuple(members)

    @property
    def inner_type(self) -> "SyntaxNode | None":
        if self.kind is not SyntaxKind.PARENTHESIZED_TYPE:
            return None
        return self.children[0] if self.children else None


NodeChain = tuple[SyntaxNode, ...]
