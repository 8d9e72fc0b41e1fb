"""Navigation service protocol and a static, table-driven implementation."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Iterable, Protocol, Sequence

from jsxhandler.editor import Position

from .models import Location, Range, SymbolInformation

__all__ = ["NavigationService", "StaticNavigationService"]


class NavigationService(Protocol):
    """Answer type-definition and document-symbol queries.

    Both lookups return ``None`` or an empty sequence when nothing is found;
    they never raise for a missing result.
    """

    async def find_type_definition(
        self,
        document_uri: str,
        position: Position,
    ) -> Sequence[Location] | None:
        """Return the type definitions of the symbol at ``position``."""

    async def find_document_symbols(
        self,
        document_uri: str,
    ) -> Sequence[SymbolInformation] | None:
        """Return the symbols declared in ``document_uri``."""


class StaticNavigationService:
    """Serve lookups from registered ranges instead of a live index.

    A query matches every definition entry registered for the same document
    whose range contains the queried position.
    """

    def __init__(self, *, delay: float = 0.0) -> None:
        self._definitions: dict[str, list[tuple[Range, tuple[Location, ...]]]] = (
            defaultdict(list)
        )
        self._symbols: dict[str, list[SymbolInformation]] = defaultdict(list)
        self._delay = delay
        self.queries: list[tuple[str, Position]] = []

    def add_definition(
        self,
        document_uri: str,
        span: Range,
        *locations: Location,
    ) -> None:
        self._definitions[document_uri].append((span, tuple(locations)))

    def add_symbols(
        self,
        document_uri: str,
        symbols: Iterable[SymbolInformation],
    ) -> None:
        self._symbols[document_uri].extend(symbols)

    async def find_type_definition(
        self,
        document_uri: str,
        position: Position,
    ) -> list[Location]:
        self.queries.append((document_uri, position))
        if self._delay:
            await asyncio.sleep(self._delay)
        found: list[Location] = []
        for span, locations in self._definitions.get(document_uri, ()):
            if span.contains(position):
                found.extend(locations)
        return found

    async def find_document_symbols(
        self,
        document_uri: str,
    ) -> list[SymbolInformation]:
        if self._delay:
            await asyncio.sleep(self._delay)
        return list(self._symbols.get(document_uri, ()))
