"""Code navigation collaborators."""

from __future__ import annotations

from .models import Location, Range, SymbolInformation
from .service import NavigationService, StaticNavigationService
from .symbols import (
    get_container_symbol_at_location,
    get_container_symbol_at_position,
)

__all__ = [
    "Location",
    "NavigationService",
    "Range",
    "StaticNavigationService",
    "SymbolInformation",
    "get_container_symbol_at_location",
    "get_container_symbol_at_position",
]
