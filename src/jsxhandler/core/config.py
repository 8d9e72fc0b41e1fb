"""Configuration models and loaders for :mod:`jsxhandler`."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
import os
from enum import StrEnum
from pathlib import Path
from typing import Any, Mapping

import tomllib
import tomlkit
from pydantic import BaseModel, Field, field_validator, model_validator

from jsxhandler.resources import get_resource


class ParserLanguage(StrEnum):
    """Grammar variants accepted by the tree provider."""

    TSX = "tsx"
    TYPESCRIPT = "typescript"


class ParserSettings(BaseModel):
    """Syntax tree provider configuration."""

    language: ParserLanguage = Field(
        default=ParserLanguage.TSX,
        description="Grammar used when parsing documents.",
    )

    model_config = {"frozen": True}


class LibrarySettings(BaseModel):
    """Describe the UI library whose components receive handlers."""

    name: str = Field(
        default="antd",
        description="Package name of the UI library under node_modules.",
    )
    module_dirs: tuple[str, ...] = Field(
        default=("lib", "es"),
        description="Build directories holding per-component folders.",
    )
    runtime_modules: tuple[str, ...] = Field(
        default=("react", "@types/react"),
        description="Packages whose classes mark a UI class component.",
    )
    component_aliases: dict[str, str] = Field(
        default_factory=dict,
        description=(
            "Explicit interface name to canonical component name mappings."
        ),
    )

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Library name must not be empty")
        return value

    @field_validator("module_dirs", "runtime_modules")
    @classmethod
    def _dedupe(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Drop blank and repeated entries while keeping their order."""

        stripped = (item.strip() for item in value)
        return tuple(dict.fromkeys(item for item in stripped if item))


class InsertionSettings(BaseModel):
    """Defaults applied when composing and inserting handler stubs."""

    placeholder: str = Field(
        default="Q",
        description="Identifier character patched in before the cursor.",
    )
    handler_prefix: str = Field(
        default="handle",
        description="Prefix prepended to generated handler names.",
    )
    event_prefix: str = Field(
        default="on",
        description="Attribute prefix stripped before naming a handler.",
    )
    default_indent: int = Field(
        default=2,
        ge=0,
        description="Indent used when the anchor line has none to copy.",
    )

    model_config = {"frozen": True}

    @field_validator("placeholder")
    @classmethod
    def _validate_placeholder(cls, value: str) -> str:
        if len(value) != 1 or not (value.isalpha() or value in "_$"):
            raise ValueError(
                "Placeholder must be a single identifier character"
            )
        return value


class AppConfig(BaseModel):
    """Root configuration for the :mod:`jsxhandler` application."""

    log_level: str = Field(
        default="INFO",
        description="Default logging level for the application runtime.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory receiving JSON log files.",
    )
    library: LibrarySettings = Field(default_factory=LibrarySettings)
    insertion: InsertionSettings = Field(default_factory=InsertionSettings)
    parser: ParserSettings = Field(default_factory=ParserSettings)

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @model_validator(mode="after")
    def _post_process(self) -> "AppConfig":
        object.__setattr__(self, "log_level", self.log_level.upper())
        return self


DEFAULTS_RESOURCE_NAME = "jsxhandler.defaults.toml"
USER_CONFIG_NAME = "jsxhandler.toml"
ENV_PREFIX = "JSXHANDLER_"


def read_packaged_defaults_text() -> str:
    """Return the raw packaged defaults TOML content."""

    resource = get_resource(DEFAULTS_RESOURCE_NAME)
    return resource.read_text(encoding="utf-8")


def load_packaged_defaults() -> dict[str, Any]:
    """Load the packaged defaults as a plain dictionary.

    Example:
        >>> load_packaged_defaults()["log_level"]
        'INFO'
    """

    return tomllib.loads(read_packaged_defaults_text())


def load_user_config(path: Path) -> dict[str, Any] | None:
    """Parse a user ``jsxhandler.toml`` if it exists."""

    if not path.exists():
        return None
    return tomllib.loads(path.read_text(encoding="utf-8"))


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Translate ``JSXHANDLER_*`` variables into a config layer."""

    source = os.environ if environ is None else environ
    layer: dict[str, Any] = {}
    level = source.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        layer["log_level"] = level
    log_dir = source.get(f"{ENV_PREFIX}LOG_DIR")
    if log_dir:
        layer["log_dir"] = log_dir
    library = source.get(f"{ENV_PREFIX}LIBRARY")
    if library:
        layer["library"] = {"name": library}
    return layer


def _deep_merge(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> dict[str, Any]:
    """Recursively merge ``overlay`` into ``base`` returning a new dict."""

    merged: dict[str, Any] = dict(base)
    for key, value in overlay.items():
        if (
            key in merged
            and isinstance(merged[key], MappingABC)
            and isinstance(value, MappingABC)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    *,
    defaults: Mapping[str, Any] | None = None,
    user_config: Mapping[str, Any] | None = None,
    env_config: Mapping[str, Any] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Load configuration according to the precedence stack.

    Later layers win: defaults < user config < environment < CLI flags.

    Raises:
        pydantic.ValidationError: If the merged payload is invalid.
    """

    stack = dict(load_packaged_defaults() if defaults is None else defaults)
    for layer in (user_config, env_config, cli_overrides):
        if layer:
            stack = _deep_merge(stack, layer)
    return AppConfig(**stack)


def render_user_config(config: AppConfig) -> str:
    """Render ``config`` as a ``jsxhandler.toml`` document."""

    document = tomlkit.document()
    document.add(
        tomlkit.comment(
            "Precedence: CLI flags > env vars > jsxhandler.toml > defaults"
        )
    )
    document.add(tomlkit.nl())
    document["log_level"] = config.log_level
    if config.log_dir is not None:
        document["log_dir"] = str(config.log_dir)

    library = tomlkit.table()
    library["name"] = config.library.name
    library["module_dirs"] = list(config.library.module_dirs)
    library["runtime_modules"] = list(config.library.runtime_modules)
    if config.library.component_aliases:
        aliases = tomlkit.table()
        for key in sorted(config.library.component_aliases):
            aliases[key] = config.library.component_aliases[key]
        library.add("component_aliases", aliases)
    document["library"] = library

    insertion = tomlkit.table()
    insertion["placeholder"] = config.insertion.placeholder
    insertion["handler_prefix"] = config.insertion.handler_prefix
    insertion["event_prefix"] = config.insertion.event_prefix
    insertion["default_indent"] = config.insertion.default_indent
    document["insertion"] = insertion

    parser = tomlkit.table()
    parser["language"] = config.parser.language.value
    document["parser"] = parser

    return tomlkit.dumps(document)


__all__ = [
    "AppConfig",
    "DEFAULTS_RESOURCE_NAME",
    "ENV_PREFIX",
    "InsertionSettings",
    "LibrarySettings",
    "ParserLanguage",
    "ParserSettings",
    "USER_CONFIG_NAME",
    "env_overrides",
    "load_config",
    "load_packaged_defaults",
    "load_user_config",
    "read_packaged_defaults_text",
    "render_user_config",
]
