"""Tests for :mod:`jsxhandler.handlers.jsx_context`."""

from __future__ import annotations

import asyncio

import pytest

from jsxhandler.core.config import LibrarySettings
from jsxhandler.editor import Position, TextDocument
from jsxhandler.handlers import (
    match_attribute_context,
    patch_source_at,
    resolve_jsx_component,
)
from jsxhandler.library import ComponentNameResolver, LibraryModuleMatcher
from jsxhandler.navigation import Location, Range, StaticNavigationService
from jsxhandler.syntax import SyntaxKind

BUTTON_TYPES = "file:///app/node_modules/antd/lib/button/index.d.ts"


def test_patch_source_at_replaces_previous_character() -> None:
    assert patch_source_at("<Button . />", 9) == "<Button Q />"
    assert patch_source_at("ab", 2, placeholder="_") == "a_"


@pytest.mark.parametrize("offset", [0, -1, 3])
def test_patch_source_at_rejects_offsets_outside_text(offset: int) -> None:
    with pytest.raises(ValueError):
        patch_source_at("ab", offset)


def test_match_attribute_context_requires_exact_tail(make_node) -> None:
    element = make_node("tag", 0, 20, kind=SyntaxKind.JSX_SELF_CLOSING_ELEMENT)
    attributes = make_node("attrs", 8, 15, kind=SyntaxKind.JSX_ATTRIBUTES)
    attribute = make_node("attr", 8, 15, kind=SyntaxKind.JSX_ATTRIBUTE)
    name = make_node("name", 8, 15, kind=SyntaxKind.IDENTIFIER)
    root = make_node("root", 0, 20, kind=SyntaxKind.SOURCE_FILE)

    context = match_attribute_context((root, element, attributes, attribute, name))

    assert context is not None
    assert (context.element, context.attribute, context.name) == (
        element,
        attribute,
        name,
    )
    assert match_attribute_context((element, attributes, attribute)) is None
    assert match_attribute_context((root, attributes, attribute, name)) is None


def _resolve(provider, text: str, offset: int, navigation: StaticNavigationService):
    document = TextDocument("file:///app/src/App.tsx", text)
    return asyncio.run(
        resolve_jsx_component(
            document,
            document.position_at(offset),
            provider=provider,
            navigation=navigation,
            matcher=LibraryModuleMatcher(LibrarySettings()),
            resolver=ComponentNameResolver(),
        )
    )


def test_tag_name_without_attribute_yields_none(provider) -> None:
    text = "const X = () => { return <div/> }"
    navigation = StaticNavigationService()

    component = _resolve(provider, text, text.index("div") + 2, navigation)

    assert component is None
    assert navigation.queries == []


def test_attribute_position_resolves_library_component(provider) -> None:
    text = "const a = <Button o />;"
    tag = text.index("Button")
    navigation = StaticNavigationService()
    navigation.add_definition(
        "file:///app/src/App.tsx",
        Range.at(0, tag, len("Button")),
        Location(BUTTON_TYPES, Range.at(40, 17, 11), "ButtonProps"),
    )

    component = _resolve(provider, text, text.index(" o ") + 2, navigation)

    assert component == "Button"
    assert navigation.queries == [
        ("file:///app/src/App.tsx", Position(0, tag + len("Button")))
    ]


def test_attribute_on_project_component_yields_none(provider) -> None:
    text = "const a = <Button o />;"
    tag = text.index("Button")
    navigation = StaticNavigationService()
    navigation.add_definition(
        "file:///app/src/App.tsx",
        Range.at(0, tag, len("Button")),
        Location("file:///app/src/Button.tsx", Range.at(3, 17, 11), "ButtonProps"),
    )

    assert _resolve(provider, text, text.index(" o ") + 2, navigation) is None


def test_offset_at_document_start_yields_none(provider) -> None:
    assert _resolve(provider, "<Button />", 0, StaticNavigationService()) is None
