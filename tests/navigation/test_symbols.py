"""Tests for :mod:`jsxhandler.navigation`."""

from __future__ import annotations

import asyncio

from jsxhandler.editor import Position
from jsxhandler.navigation import (
    Location,
    Range,
    StaticNavigationService,
    SymbolInformation,
    get_container_symbol_at_location,
    get_container_symbol_at_position,
)

DOC = "file:///app/src/App.tsx"
TYPES = "file:///app/node_modules/antd/lib/button/button.d.ts"


def _definition() -> Location:
    return Location(TYPES, Range(Position(10, 4), Position(10, 15)), "ButtonProps")


def _navigation() -> StaticNavigationService:
    navigation = StaticNavigationService()
    navigation.add_definition(DOC, Range.at(3, 5, 6), _definition())
    navigation.add_symbols(
        TYPES,
        [
            SymbolInformation(
                "BaseButtonProps",
                "interface",
                Location(TYPES, Range(Position(2, 0), Position(6, 1))),
            ),
            SymbolInformation(
                "ButtonProps",
                "interface",
                Location(TYPES, Range(Position(9, 0), Position(20, 1))),
            ),
        ],
    )
    return navigation


def test_location_path_accepts_uris_and_bare_paths() -> None:
    assert _definition().path == "/app/node_modules/antd/lib/button/button.d.ts"
    assert Location("/tmp/x.ts", Range.at(0, 0)).path == "/tmp/x.ts"
    assert Location("file:///tmp/a%20b.ts", Range.at(0, 0)).path == "/tmp/a b.ts"


def test_range_contains_is_inclusive() -> None:
    span = Range.at(3, 5, 6)

    assert span.contains(Position(3, 5))
    assert span.contains(Position(3, 11))
    assert not span.contains(Position(3, 12))
    assert not span.contains(Position(2, 7))


def test_static_service_records_queries() -> None:
    navigation = _navigation()

    found = asyncio.run(navigation.find_type_definition(DOC, Position(3, 7)))
    missing = asyncio.run(navigation.find_type_definition(DOC, Position(8, 0)))

    assert found == [_definition()]
    assert missing == []
    assert navigation.queries == [(DOC, Position(3, 7)), (DOC, Position(8, 0))]


def test_container_symbol_at_position() -> None:
    navigation = _navigation()

    name = asyncio.run(
        get_container_symbol_at_position(navigation, DOC, Position(3, 6))
    )

    assert name == "ButtonProps"


def test_container_symbol_missing_definition_or_symbols() -> None:
    navigation = _navigation()
    stray = Location("file:///elsewhere.ts", Range.at(1, 0))

    assert (
        asyncio.run(get_container_symbol_at_position(navigation, DOC, Position(0, 0)))
        is None
    )
    assert asyncio.run(get_container_symbol_at_location(navigation, stray)) is None
