"""Tests for :mod:`jsxhandler.core.config`."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from jsxhandler.core.config import (
    AppConfig,
    InsertionSettings,
    LibrarySettings,
    ParserLanguage,
    env_overrides,
    load_config,
    load_packaged_defaults,
    load_user_config,
    read_packaged_defaults_text,
    render_user_config,
)


def test_packaged_defaults_match_model_defaults() -> None:
    defaults = load_packaged_defaults()
    config = load_config()

    assert defaults["log_level"] == "INFO"
    assert "[library]" in read_packaged_defaults_text()
    assert config.model_dump() == AppConfig().model_dump()


def test_load_config_precedence_stack() -> None:
    config = load_config(
        user_config={"log_level": "warning", "library": {"name": "my-ui"}},
        env_config={"log_level": "error"},
        cli_overrides={"log_level": "debug"},
    )

    assert config.log_level == "DEBUG"
    assert config.library.name == "my-ui"
    # Nested tables merge rather than replace.
    assert config.library.module_dirs == ("lib", "es")


def test_env_overrides_reads_prefixed_variables(tmp_path: Path) -> None:
    layer = env_overrides(
        {
            "JSXHANDLER_LOG_LEVEL": "warning",
            "JSXHANDLER_LOG_DIR": str(tmp_path),
            "JSXHANDLER_LIBRARY": "arco",
            "UNRELATED": "1",
        }
    )

    assert layer == {
        "log_level": "warning",
        "log_dir": str(tmp_path),
        "library": {"name": "arco"},
    }
    assert env_overrides({}) == {}


def test_load_user_config_missing_file_returns_none(tmp_path: Path) -> None:
    assert load_user_config(tmp_path / "absent.toml") is None

    path = tmp_path / "jsxhandler.toml"
    path.write_text('[insertion]\nhandler_prefix = "on"\n', encoding="utf-8")
    assert load_user_config(path) == {"insertion": {"handler_prefix": "on"}}


def test_library_settings_dedupe_directories() -> None:
    settings = LibrarySettings(module_dirs=("lib", "es", "lib", " "))

    assert settings.module_dirs == ("lib", "es")


@pytest.mark.parametrize("placeholder", ["", "QQ", "1", "-"])
def test_insertion_settings_reject_bad_placeholders(placeholder: str) -> None:
    with pytest.raises(ValidationError):
        InsertionSettings(placeholder=placeholder)


def test_insertion_settings_reject_negative_indent() -> None:
    with pytest.raises(ValidationError):
        InsertionSettings(default_indent=-1)


def test_render_user_config_round_trips() -> None:
    config = load_config(
        cli_overrides={
            "library": {"component_aliases": {"InternalFormItemProps": "Form.Item"}},
            "parser": {"language": "typescript"},
        }
    )

    rendered = render_user_config(config)
    parsed = tomllib.loads(rendered)

    assert rendered.startswith("# Precedence")
    assert parsed["library"]["component_aliases"] == {
        "InternalFormItemProps": "Form.Item"
    }
    assert load_config(user_config=parsed).parser.language is ParserLanguage.TYPESCRIPT
