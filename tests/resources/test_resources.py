"""Tests for :mod:`jsxhandler.resources`."""

from __future__ import annotations

import pytest

from jsxhandler.core.config import DEFAULTS_RESOURCE_NAME
from jsxhandler.resources import get_resource


def test_get_resource_returns_packaged_defaults() -> None:
    resource = get_resource(DEFAULTS_RESOURCE_NAME)

    assert "[insertion]" in resource.read_text(encoding="utf-8")


def test_get_resource_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        get_resource("does-not-exist.toml")
