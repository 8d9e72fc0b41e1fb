"""Tests for :mod:`jsxhandler.handlers.compose`."""

from __future__ import annotations

import pytest

from jsxhandler.handlers import (
    FunctionParam,
    add_handler_prefix,
    compose_handler_fragment,
)


@pytest.mark.parametrize(
    ("attribute", "expected"),
    [
        ("onChange", "handleChange"),
        ("onVisibleChange", "handleVisibleChange"),
        ("select", "handleSelect"),
        ("one", "handleOne"),
        (" onClick ", "handleClick"),
    ],
)
def test_add_handler_prefix(attribute: str, expected: str) -> None:
    assert add_handler_prefix(attribute) == expected


def test_add_handler_prefix_custom_prefixes() -> None:
    assert add_handler_prefix("whenOpen", handler_prefix="do", event_prefix="when") == "doOpen"


def test_compose_class_fragment() -> None:
    params = [FunctionParam("", "value"), FunctionParam("", "option")]

    fragment = compose_handler_fragment("handleChange", params, 2, "class")

    assert fragment == "\n  handleChange = (value, option) => {\n  };\n"


def test_compose_functional_fragment() -> None:
    fragment = compose_handler_fragment("handleClick", [], 4, "functional")

    assert fragment == "\n    const handleClick = () => {\n    };\n"


def test_compose_rejects_unknown_shape() -> None:
    with pytest.raises(ValueError, match="Unknown component shape"):
        compose_handler_fragment("handleClick", [], 2, "hook")
