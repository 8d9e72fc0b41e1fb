"""Locate JSX attribute contexts and splice event-handler stubs into
React components.

Example:
    >>> from jsxhandler import __version__
    >>> __version__.split(".")[0]
    '0'
"""

from importlib import metadata

try:
    __version__ = metadata.version("jsxhandler")
except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"

__all__ = ["__version__"]
