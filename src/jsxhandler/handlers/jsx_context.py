"""Identify the UI library component owning a JSX attribute."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from jsxhandler.core.logging import Logger, get_logger
from jsxhandler.editor import Position, TextDocument
from jsxhandler.library import ComponentNameResolver, ModuleMatcher
from jsxhandler.navigation import NavigationService
from jsxhandler.syntax import (
    SyntaxKind,
    SyntaxNode,
    TreeProvider,
    resolve_path_at,
)

__all__ = [
    "JsxAttributeContext",
    "match_attribute_context",
    "patch_source_at",
    "resolve_jsx_component",
]

_TAG_KINDS = (SyntaxKind.JSX_OPENING_ELEMENT, SyntaxKind.JSX_SELF_CLOSING_ELEMENT)


@dataclass(frozen=True, slots=True)
class JsxAttributeContext:
    """The element, attribute and attribute name around a cursor."""

    element: SyntaxNode
    attribute: SyntaxNode
    name: SyntaxNode


def patch_source_at(text: str, offset: int, placeholder: str = "Q") -> str:
    """Replace the character before ``offset`` with ``placeholder``.

    The trigger character typed by the user rarely parses as an attribute;
    swapping it for an identifier character does, and leaves every other
    offset in the text unchanged.

    Example:
        >>> patch_source_at("<Button . />", 9)
        '<Button Q />'
    """

    if not 0 < offset <= len(text):
        raise ValueError(f"Offset {offset} cannot be patched")
    return f"{text[: offset - 1]}{placeholder}{text[offset:]}"


def match_attribute_context(
    chain: Sequence[SyntaxNode],
) -> JsxAttributeContext | None:
    """Match ``element > attributes > attribute > identifier`` at the tail."""

    if len(chain) < 4:
        return None
    element, attributes, attribute, name = chain[-4:]
    if (
        element.kind in _TAG_KINDS
        and attributes.kind is SyntaxKind.JSX_ATTRIBUTES
        and attribute.kind is SyntaxKind.JSX_ATTRIBUTE
        and name.kind is SyntaxKind.IDENTIFIER
    ):
        return JsxAttributeContext(element=element, attribute=attribute, name=name)
    return None


async def resolve_jsx_component(
    document: TextDocument,
    position: Position,
    *,
    provider: TreeProvider,
    navigation: NavigationService,
    matcher: ModuleMatcher,
    resolver: ComponentNameResolver,
    placeholder: str = "Q",
    logger: Logger | None = None,
) -> str | None:
    """Return the canonical name of the library component at ``position``.

    ``None`` means the cursor is not in an attribute-name position, or the
    element's type is not defined inside the UI library.
    """

    log = logger or get_logger(__name__)
    offset = document.offset_at(position)
    if offset < 1:
        return None

    root = provider.parse(
        document.uri, patch_source_at(document.text, offset, placeholder)
    )
    context = match_attribute_context(resolve_path_at(root, offset - 1))
    if context is None:
        log.debug("jsx-context-miss", uri=document.uri, offset=offset)
        return None

    tag_name = context.element.tag_name
    if tag_name is None:
        return None

    # Anchor on the component name; the attribute itself is mid-edit.
    definitions = await navigation.find_type_definition(
        document.uri,
        document.position_at(tag_name.end),
    )
    for definition in definitions or ():
        matched = matcher.match_library_module(definition.path)
        if matched is None:
            continue
        component = resolver.resolve(definition.text, matched.component_folder)
        log.debug(
            "jsx-component-resolved",
            tag=tag_name.text,
            folder=matched.component_folder,
            component=component,
        )
        return component

    log.debug("jsx-component-outside-library", tag=tag_name.text)
    return None
