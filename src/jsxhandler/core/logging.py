"""Structured logging for the resolver, insertion and CLI layers.

Events go through structlog into stdlib logging. The console copy is
rendered by Rich on stderr so command output on stdout stays clean; an
optional ``log_dir`` also receives one JSON object per event.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
import structlog

Logger = structlog.stdlib.BoundLogger

LOG_FILENAME = "jsxhandler.log"

_PRE_CHAIN: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _level_number(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):  # unknown names come back as strings
        raise ValueError(f"Unsupported log level: {level!r}")
    return value


def _formatter(renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=list(_PRE_CHAIN),
    )


def _console_handler(console: Console | None) -> RichHandler:
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="%H:%M:%S",
    )
    handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
    return handler


def _json_file_handler(log_dir: str | Path) -> logging.FileHandler:
    directory = Path(log_dir).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(
        directory / LOG_FILENAME, encoding="utf-8", delay=True
    )
    handler.setFormatter(
        _formatter(structlog.processors.JSONRenderer(sort_keys=True))
    )
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    log_dir: str | Path | None = None,
    console: Console | None = None,
) -> None:
    """Route structlog events to a Rich console and, optionally, a file.

    Args:
        level: Level name for the root logger, case-insensitive.
        log_dir: Directory that receives ``jsxhandler.log`` (JSON lines,
            appended across runs). Created when missing.
        console: Rich console override, mostly for tests.

    Raises:
        ValueError: If ``level`` is not a logging level name.
    """

    log_level = _level_number(level)

    structlog.reset_defaults()
    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [_console_handler(console)]
    if log_dir is not None:
        handlers.append(_json_file_handler(log_dir))

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(log_level)

    logging.captureWarnings(True)


def get_logger(name: str | None = None, **initial_context: Any) -> Logger:
    """Return a structlog logger with ``initial_context`` bound.

    Call at the logging site; loggers bound at import time keep the
    configuration that was active then.
    """

    return structlog.get_logger(name).bind(**initial_context)


__all__ = ["LOG_FILENAME", "Logger", "configure_logging", "get_logger"]
