"""Container-symbol lookups built on a navigation service.

These answer "which declaration holds the type of this attribute", which is
where an editor finds the property signature for a handler. The CLI has no
navigation backend; :meth:`HandlerService.signature_container` exposes the
lookup when one is configured.
"""

from __future__ import annotations

from jsxhandler.editor import Position

from .models import Location
from .service import NavigationService

__all__ = [
    "get_container_symbol_at_location",
    "get_container_symbol_at_position",
]


async def get_container_symbol_at_position(
    navigation: NavigationService,
    document_uri: str,
    position: Position,
) -> str | None:
    """Name the symbol declaring the type of whatever sits at ``position``.

    Only the first type definition is considered.
    """

    definitions = await navigation.find_type_definition(document_uri, position)
    if not definitions:
        return None
    return await get_container_symbol_at_location(navigation, definitions[0])


async def get_container_symbol_at_location(
    navigation: NavigationService,
    location: Location,
) -> str | None:
    """Return the first document symbol whose lines cover ``location``."""

    symbols = await navigation.find_document_symbols(location.uri)
    if not symbols:
        return None
    # Symbol ranges do not start at line starts; compare whole lines.
    for symbol in symbols:
        symbol_range = symbol.location.range
        if (
            symbol_range.start.line <= location.range.start.line
            and symbol_range.end.line >= location.range.end.line
        ):
            return symbol.name
    return None
