"""Console-script entry point for :mod:`jsxhandler`."""

from __future__ import annotations

from jsxhandler.cli import create_app


def main() -> None:
    """Execute the CLI application."""

    app = create_app()
    app(prog_name="jsxhandler")


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    main()


__all__ = ["main"]
