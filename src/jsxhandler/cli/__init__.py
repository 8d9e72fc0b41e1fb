"""Command-line interface for :mod:`jsxhandler`.

Example:
    >>> import typer
    >>> from jsxhandler.cli import create_app
    >>> isinstance(create_app(), typer.Typer)
    True
"""

from __future__ import annotations

from pathlib import Path

import typer

from jsxhandler.cli.commands import register_commands
from jsxhandler.core.config import (
    USER_CONFIG_NAME,
    env_overrides,
    load_config,
    load_user_config,
)
from jsxhandler.core.logging import configure_logging, get_logger

_app_help = (
    "Locate JSX attribute contexts and splice event-handler stubs into "
    "React components."
    "\n\n"
    f"Settings are read from ./{USER_CONFIG_NAME} when present."
)


def create_app() -> "typer.Typer":
    """Return the Typer application powering the ``jsxhandler`` CLI."""

    app = typer.Typer(
        help=_app_help,
        no_args_is_help=True,
        rich_markup_mode="rich",
    )

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        config_file: Path | None = typer.Option(
            None,
            "--config",
            "-c",
            dir_okay=False,
            help=f"Configuration file (defaults to ./{USER_CONFIG_NAME}).",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            "-l",
            help="Override the logging level (DEBUG/INFO/WARNING/ERROR).",
        ),
    ) -> None:
        """Load configuration and logging before dispatching a command."""

        if config_file is not None and not config_file.exists():
            typer.secho(
                f"Config file not found: {config_file}",
                fg=typer.colors.RED,
            )
            raise typer.Exit(code=1)

        user_path = config_file or Path.cwd() / USER_CONFIG_NAME
        cli_overrides = {"log_level": log_level} if log_level else None
        try:
            config = load_config(
                user_config=load_user_config(user_path),
                env_config=env_overrides(),
                cli_overrides=cli_overrides,
            )
            configure_logging(level=config.log_level, log_dir=config.log_dir)
        except ValueError as exc:  # includes pydantic and TOML errors
            typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED)
            raise typer.Exit(code=1) from exc

        get_logger(__name__).debug(
            "cli-configured",
            command=ctx.invoked_subcommand,
            config_file=str(user_path),
        )
        ctx.obj = config

    register_commands(app)
    return app


__all__ = ["create_app"]
