"""Typer commands exposed by the ``jsxhandler`` CLI."""

from __future__ import annotations

import asyncio
from enum import StrEnum
from pathlib import Path
from typing import NoReturn

import typer

from jsxhandler.core.config import AppConfig, render_user_config
from jsxhandler.editor import BufferEditor, Position, TextDocument
from jsxhandler.handlers import ComponentShape, HandlerService, extract_params
from jsxhandler.syntax import (
    SyntaxNode,
    TreeProviderError,
    TreeSitterProvider,
    resolve_path_at,
)

__all__ = ["register_commands"]

_PREVIEW_WIDTH = 40


class ShapeChoice(StrEnum):
    AUTO = "auto"
    CLASS = "class"
    FUNCTIONAL = "functional"


def _config(ctx: typer.Context) -> AppConfig:
    config = ctx.obj
    if not isinstance(config, AppConfig):  # pragma: no cover - callback guard
        raise typer.Exit(code=1)
    return config


def _load_document(path: Path) -> TextDocument:
    try:
        return TextDocument.from_path(path)
    except (OSError, UnicodeDecodeError) as exc:
        typer.secho(f"Cannot read {path}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


def _fail_provider(exc: TreeProviderError) -> NoReturn:
    typer.secho(str(exc), fg=typer.colors.RED)
    raise typer.Exit(code=1) from exc


def _preview(node: SyntaxNode) -> str:
    text = " ".join(node.text.split())
    if len(text) > _PREVIEW_WIDTH:
        return f"{text[: _PREVIEW_WIDTH - 3]}..."
    return text


def _resolve_offset(
    document: TextDocument,
    offset: int | None,
    line: int | None,
    column: int,
) -> int:
    if offset is not None:
        return offset
    if line is None:
        raise typer.BadParameter(
            "Provide --offset or --line/--column.",
            param_hint="--offset/--line",
        )
    return document.offset_at(Position(line, column))


def path_command(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="TypeScript/TSX file to inspect.",
    ),
    offset: int | None = typer.Option(
        None, "--offset", "-o", min=0, help="Character offset in the file."
    ),
    line: int | None = typer.Option(
        None, "--line", min=0, help="Zero-based line (instead of --offset)."
    ),
    column: int = typer.Option(0, "--column", min=0, help="Zero-based column."),
) -> None:
    """Print the chain of nodes containing a position, outermost first."""

    config = _config(ctx)
    document = _load_document(file)
    target = _resolve_offset(document, offset, line, column)

    provider = TreeSitterProvider(language=config.parser.language)
    try:
        root = provider.parse(document.uri, document.text)
    except TreeProviderError as exc:
        _fail_provider(exc)

    chain = resolve_path_at(root, target)
    if not chain:
        typer.secho(f"No node contains offset {target}.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for depth, node in enumerate(chain):
        typer.echo(
            f"{'  ' * depth}{node.kind.value} ({node.type}) "
            f"[{node.pos}, {node.end}] {_preview(node)}"
        )


def params_command(
    fragment: str = typer.Argument(
        ...,
        help="Property signature, e.g. 'onChange?: (value: number) => void;'",
    ),
) -> None:
    """Print the parameter names of a function-typed property signature."""

    try:
        params = extract_params(fragment)
    except TreeProviderError as exc:
        _fail_provider(exc)

    if not params:
        typer.secho("No parameters found.", fg=typer.colors.YELLOW)
        return
    for param in params:
        typer.echo(param.text)


def insert_command(  # noqa: PLR0913
    ctx: typer.Context,
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="TypeScript/TSX file holding the component.",
    ),
    line: int = typer.Option(..., "--line", min=0, help="Zero-based line."),
    column: int = typer.Option(..., "--column", min=0, help="Zero-based column."),
    attribute: str = typer.Option(
        ..., "--attribute", "-a", help="Event attribute, e.g. onChange."
    ),
    signature: str | None = typer.Option(
        None,
        "--signature",
        "-s",
        help="Property signature supplying the handler parameters.",
    ),
    shape: ShapeChoice = typer.Option(
        ShapeChoice.AUTO,
        "--shape",
        case_sensitive=False,
        help="Component shape; auto detects class before functional.",
    ),
    indent: int | None = typer.Option(
        None, "--indent", min=0, help="Indent width (defaults to the anchor's)."
    ),
    write: bool = typer.Option(
        False, "--write", "-w", help="Write the result back to FILE."
    ),
) -> None:
    """Insert a handler stub for ATTRIBUTE into the component at a position."""

    config = _config(ctx)
    document = _load_document(file)
    service = HandlerService.from_config(config)
    editor = BufferEditor(document)
    requested = None if shape is ShapeChoice.AUTO else ComponentShape(shape.value)

    try:
        result = asyncio.run(
            service.insert_handler(
                document,
                Position(line, column),
                attribute,
                editor=editor,
                signature=signature,
                shape=requested,
                indent=indent,
            )
        )
    except TreeProviderError as exc:
        _fail_provider(exc)

    if result is None:
        typer.secho(
            f"No component found at {line}:{column} in {file}.",
            fg=typer.colors.YELLOW,
        )
        raise typer.Exit(code=1)

    if write:
        file.write_text(document.text, encoding="utf-8", newline="")
        typer.secho(
            f"Inserted {result.handler_name} ({result.target.shape.value}) "
            f"at {result.position.line}:{result.position.character}",
            fg=typer.colors.GREEN,
        )
        return
    typer.echo(document.text, nl=False)


def config_command(ctx: typer.Context) -> None:
    """Render the effective configuration as TOML."""

    typer.echo(render_user_config(_config(ctx)), nl=False)


def register_commands(app: typer.Typer) -> None:
    app.command("path")(path_command)
    app.command("params")(params_command)
    app.command("insert")(insert_command)
    app.command("config")(config_command)
