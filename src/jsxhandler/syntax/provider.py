"""tree-sitter backed syntax tree provider."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Protocol

from jsxhandler.core.config import ParserLanguage
from jsxhandler.core.logging import Logger, get_logger

from .errors import TreeProviderError
from .nodes import SyntaxKind, SyntaxNode

__all__ = [
    "TreeProvider",
    "TreeSitterProvider",
]


class TreeProvider(Protocol):
    """Build a fresh syntax tree for ``text``."""

    def parse(self, file_id: str, text: str) -> SyntaxNode:
        """Return the root node of ``text`` parsed as ``file_id``."""


_KIND_BY_TYPE: dict[str, SyntaxKind] = {
    "program": SyntaxKind.SOURCE_FILE,
    "class_declaration": SyntaxKind.CLASS_DECLARATION,
    "abstract_class_declaration": SyntaxKind.CLASS_DECLARATION,
    "class": SyntaxKind.CLASS_DECLARATION,
    "function_declaration": SyntaxKind.FUNCTION_DECLARATION,
    "generator_function_declaration": SyntaxKind.FUNCTION_DECLARATION,
    "lexical_declaration": SyntaxKind.VARIABLE_STATEMENT,
    "variable_declaration": SyntaxKind.VARIABLE_STATEMENT,
    "variable_declarator": SyntaxKind.VARIABLE_DECLARATOR,
    "return_statement": SyntaxKind.RETURN_STATEMENT,
    "arrow_function": SyntaxKind.ARROW_FUNCTION,
    "function_expression": SyntaxKind.FUNCTION_EXPRESSION,
    "function": SyntaxKind.FUNCTION_EXPRESSION,
    "class_heritage": SyntaxKind.HERITAGE_CLAUSE,
    "jsx_element": SyntaxKind.JSX_ELEMENT,
    "jsx_opening_element": SyntaxKind.JSX_OPENING_ELEMENT,
    "jsx_self_closing_element": SyntaxKind.JSX_SELF_CLOSING_ELEMENT,
    "jsx_attribute": SyntaxKind.JSX_ATTRIBUTE,
    "identifier": SyntaxKind.IDENTIFIER,
    "property_identifier": SyntaxKind.IDENTIFIER,
    "type_identifier": SyntaxKind.IDENTIFIER,
    "shorthand_property_identifier": SyntaxKind.IDENTIFIER,
    "type_alias_declaration": SyntaxKind.TYPE_ALIAS,
    "object_type": SyntaxKind.TYPE_LITERAL,
    "property_signature": SyntaxKind.PROPERTY_SIGNATURE,
    "function_type": SyntaxKind.FUNCTION_TYPE,
    "union_type": SyntaxKind.UNION_TYPE,
    "parenthesized_type": SyntaxKind.PARENTHESIZED_TYPE,
    "required_parameter": SyntaxKind.PARAMETER,
    "optional_parameter": SyntaxKind.PARAMETER,
}

_FIELDS_BY_TYPE: dict[str, tuple[str, ...]] = {
    "class_declaration": ("name", "body"),
    "abstract_class_declaration": ("name", "body"),
    "class": ("name", "body"),
    "function_declaration": ("name", "parameters", "body"),
    "generator_function_declaration": ("name", "parameters", "body"),
    "variable_declarator": ("name", "value"),
    "arrow_function": ("parameters", "body"),
    "function_expression": ("name", "parameters", "body"),
    "function": ("name", "parameters", "body"),
    "extends_clause": ("value",),
    "jsx_opening_element": ("name",),
    "jsx_self_closing_element": ("name",),
    "type_alias_declaration": ("name", "value"),
    "property_signature": ("name", "type"),
    "function_type": ("parameters", "return_type"),
    "required_parameter": ("pattern", "type"),
    "optional_parameter": ("pattern", "type"),
}

# Loop headers declare variables without forming a statement.
_LOOP_HEADERS = frozenset({"for_statement", "for_in_statement"})

_JSX_ATTRIBUTE_TYPES = frozenset({"jsx_attribute", "jsx_expression"})
_JSX_TAG_TYPES = frozenset({"jsx_opening_element", "jsx_self_closing_element"})
_TRIVIA_TYPES = frozenset({"comment", "html_comment"})


class _OffsetTable:
    """Translate UTF-8 byte offsets reported by tree-sitter to str indices."""

    __slots__ = ("_starts", "_ascii")

    def __init__(self, text: str) -> None:
        self._ascii = text.isascii()
        self._starts: list[int] = []
        if not self._ascii:
            total = 0
            for char in text:
                self._starts.append(total)
                total += len(char.encode("utf-8"))

    def to_char(self, byte_offset: int) -> int:
        if self._ascii:
            return byte_offset
        return bisect_left(self._starts, byte_offset)


@dataclass(slots=True)
class _Pending:
    """A tree-sitter node whose children are still being converted."""

    ts_node: Any
    pos: int
    parent: "_Pending | None"
    expanded: bool = False
    children: list[SyntaxNode] = field(default_factory=list)
    by_id: dict[int, SyntaxNode] = field(default_factory=dict)


@dataclass(slots=True)
class _Converter:
    source: str
    offsets: _OffsetTable

    def convert(self, root: Any) -> SyntaxNode:
        """Convert the tree under ``root`` bottom-up with an explicit stack."""

        stack = [_Pending(ts_node=root, pos=0, parent=None)]
        while stack:
            pending = stack[-1]
            if not pending.expanded:
                pending.expanded = True
                stack.extend(reversed(self._expand(pending)))
                continue

            stack.pop()
            node = self._build(pending)
            if pending.parent is None:
                return node
            pending.parent.children.append(node)
            pending.parent.by_id[pending.ts_node.id] = node

        raise TreeProviderError("tree-sitter returned an empty tree")

    def _expand(self, pending: _Pending) -> list[_Pending]:
        # Each child's full start is the end of the previous sibling token.
        queued: list[_Pending] = []
        previous_end = pending.pos
        for child in pending.ts_node.children:
            if child.type in _TRIVIA_TYPES:
                continue
            if child.is_named:
                queued.append(_Pending(ts_node=child, pos=previous_end, parent=pending))
            previous_end = self.offsets.to_char(child.end_byte)
        return queued

    def _build(self, pending: _Pending) -> SyntaxNode:
        ts_node = pending.ts_node
        parent_type = pending.parent.ts_node.type if pending.parent else None
        if parent_type is None:
            start, end = 0, len(self.source)
        else:
            start = self.offsets.to_char(ts_node.start_byte)
            end = self.offsets.to_char(ts_node.end_byte)

        fields: dict[str, tuple[SyntaxNode, ...]] = {}
        for name in _FIELDS_BY_TYPE.get(ts_node.type, ()):
            matched = tuple(
                pending.by_id[node.id]
                for node in ts_node.children_by_field_name(name)
                if node.id in pending.by_id
            )
            if matched:
                fields[name] = matched

        children = pending.children
        if ts_node.type in _JSX_TAG_TYPES:
            children = self._group_attributes(children, fields, end)

        return SyntaxNode(
            kind=self._kind_for(ts_node.type, parent_type),
            type=ts_node.type,
            pos=pending.pos,
            start=start,
            end=end,
            source=self.source,
            children=tuple(children),
            fields=fields,
        )

    @staticmethod
    def _kind_for(node_type: str, parent_type: str | None) -> SyntaxKind:
        kind = _KIND_BY_TYPE.get(node_type, SyntaxKind.OTHER)
        if kind is SyntaxKind.VARIABLE_STATEMENT and parent_type in _LOOP_HEADERS:
            return SyntaxKind.OTHER
        return kind

    def _group_attributes(
        self,
        children: list[SyntaxNode],
        fields: dict[str, tuple[SyntaxNode, ...]],
        element_end: int,
    ) -> list[SyntaxNode]:
        """Wrap JSX attributes in a list node so tags look alike."""

        attributes = [c for c in children if c.type in _JSX_ATTRIBUTE_TYPES]
        leading = [c for c in children if c.type not in _JSX_ATTRIBUTE_TYPES]
        if attributes:
            pos = attributes[0].pos
            start = attributes[0].start
            end = attributes[-1].end
        else:
            anchor = leading[-1].end if leading else element_end
            pos = start = end = anchor
        grouped = SyntaxNode(
            kind=SyntaxKind.JSX_ATTRIBUTES,
            type="jsx_attributes",
            pos=pos,
            start=start,
            end=end,
            source=self.source,
            children=tuple(attributes),
        )
        fields["attributes"] = (grouped,)
        return [*leading, grouped]


class TreeSitterProvider:
    """Parse TypeScript/TSX sources into :class:`SyntaxNode` trees.

    The tree-sitter parser is created lazily and reused; trees are built
    fresh for every :meth:`parse` call.
    """

    def __init__(
        self,
        *,
        language: ParserLanguage = ParserLanguage.TSX,
        logger: Logger | None = None,
    ) -> None:
        self._language = ParserLanguage(language)
        self._logger = logger or get_logger(__name__, language=str(language))
        self._parser: Any | None = None

    @property
    def language(self) -> ParserLanguage:
        return self._language

    def _load_parser(self) -> Any:
        if self._parser is not None:
            return self._parser
        try:
            import tree_sitter
            import tree_sitter_typescript
        except ImportError as exc:
            raise TreeProviderError(
                "Parsing requires the 'tree-sitter' and "
                "'tree-sitter-typescript' packages."
            ) from exc

        if self._language is ParserLanguage.TSX:
            capsule = tree_sitter_typescript.language_tsx()
        else:
            capsule = tree_sitter_typescript.language_typescript()
        try:
            self._parser = tree_sitter.Parser(tree_sitter.Language(capsule))
        except (TypeError, ValueError) as exc:
            raise TreeProviderError(
                f"tree-sitter grammar {self._language.value!r} is unusable: "
                f"{exc}"
            ) from exc
        return self._parser

    def parse(self, file_id: str, text: str) -> SyntaxNode:
        """Return a fresh tree for ``text``.

        Raises:
            TreeProviderError: If the grammar cannot be loaded.
        """

        parser = self._load_parser()
        tree = parser.parse(text.encode("utf-8"))
        if tree.root_node.has_error:
            self._logger.debug("parse-recovered-errors", file_id=file_id)
        converter = _Converter(source=text, offsets=_OffsetTable(text))
        return converter.convert(tree.root_node)
