"""Default handler name and stub templates."""

from __future__ import annotations

from typing import Callable, Sequence

from .params import FunctionParam

__all__ = [
    "Composer",
    "add_handler_prefix",
    "compose_handler_fragment",
]

Composer = Callable[[str, Sequence[FunctionParam], int, str], str]


def add_handler_prefix(
    attribute: str,
    *,
    handler_prefix: str = "handle",
    event_prefix: str = "on",
) -> str:
    """Name the handler for ``attribute``.

    Example:
        >>> add_handler_prefix("onChange"), add_handler_prefix("select")
        ('handleChange', 'handleSelect')
    """

    name = attribute.strip()
    remainder = name[len(event_prefix) :]
    if event_prefix and name.startswith(event_prefix) and remainder[:1].isupper():
        name = remainder
    return f"{handler_prefix}{name[:1].upper()}{name[1:]}"


def compose_handler_fragment(
    handler_name: str,
    params: Sequence[FunctionParam],
    indent: int,
    shape: str,
) -> str:
    """Render a handler stub ready to insert before an anchor node.

    Class components get a class property, functional components a
    ``const`` binding; both are arrow functions.
    """

    pad = " " * indent
    args = ", ".join(param.text for param in params)
    if shape == "class":
        head = f"{handler_name} = ({args}) => {{"
    elif shape == "functional":
        head = f"const {handler_name} = ({args}) => {{"
    else:
        raise ValueError(f"Unknown component shape: {shape!r}")
    return f"\n{pad}{head}\n{pad}}};\n"
