"""Centralized logging configuration for graphql-lint using Loguru.

The linter reports everything through log records: one error record per
diagnostic, the error-type summary and the run summary with structured
fields. Supported formats:

- ``console``: ``LEVEL | message key=value ...`` on stderr (default)
- ``json``: one serialized loguru record per line
- ``rich``: a Rich console handler

Examples
--------
Basic usage:

>>> from graphql_lint.kernel.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("linting summary", passedFiles=3, totalFiles=4)

Configure logging globally::

    from graphql_lint.kernel.logging import configure_logging
    configure_logging(level="DEBUG", format="console")
"""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger, Record

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "rich"]

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []

# Keys bound by get_logger() that are not part of a record's payload
_INTERNAL_EXTRA = frozenset({"module"})


def format_fields(extra: dict[str, Any]) -> str:
    """Render structured fields logfmt style, sorted by key.

    Strings are quoted, other values are rendered with ``str``.

    Examples
    --------
    >>> format_fields({"totalFiles": 4, "percentPassed": "75.00%"})
    'percentPassed="75.00%" totalFiles=4'
    """
    parts = []
    for key in sorted(extra):
        if key in _INTERNAL_EXTRA:
            continue
        value = extra[key]
        rendered = f'"{value}"' if isinstance(value, str) else str(value)
        parts.append(f"{key}={rendered}")
    return " ".join(parts)


def _console_format(use_color: bool) -> Any:
    level = "<level>{level: <8}</level>" if use_color else "{level: <8}"

    def formatter(record: Record) -> str:
        fields = format_fields(record["extra"]).replace("{", "{{").replace("}", "}}")
        suffix = f" {fields}" if fields else ""
        return f"{level} | {{message}}{suffix}\n{{exception}}"

    return formatter


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "console",
    use_color: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Configure global logging for graphql-lint.

    This function is idempotent - calling it multiple times with the same
    configuration will not duplicate handlers or change settings.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum log level to output
    format : LogFormat, default="console"
        Output format (console, json, rich)
    use_color : bool, default=True
        Use ANSI color codes in console format (auto-disabled for non-TTY)
    force_reconfigure : bool, default=False
        Re-add handlers even if already configured with the same settings.
        The CLI passes True so handlers bind to the current ``sys.stderr``.
    """
    global _CURRENT_CONFIG

    current_config = {"level": level, "format": format, "use_color": use_color}
    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    # Loguru's pre-installed stderr handler would print every record twice
    if _CURRENT_CONFIG is None:
        with suppress(ValueError):
            logger.remove(0)

    # Remove only our previously added handlers (not external ones)
    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if format == "rich":
        rich_handler = RichHandler(show_time=False, show_path=False, markup=False)
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")
    elif format == "json":
        handler_id = logger.add(sink=sys.stderr, level=level, serialize=True)
    else:
        colorize = use_color and sys.stderr.isatty()
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=_console_format(colorize),
            colorize=colorize,
        )
    _HANDLER_IDS.append(handler_id)

    _CURRENT_CONFIG = current_config


@lru_cache(maxsize=64)
def get_logger(name: str) -> Logger:
    """Get a logger instance bound with the module name (cached).

    Parameters
    ----------
    name : str
        Logger name, typically __name__ from the calling module

    Returns
    -------
    loguru.Logger
        Logger bound with ``module=name``

    Notes
    -----
    If configure_logging() hasn't been called, initializes with defaults
    taken from ``GRAPHQL_LINT_LOG_LEVEL`` and ``GRAPHQL_LINT_LOG_FORMAT``.
    """
    _ensure_configured()
    return logger.bind(module=name)


def _ensure_configured() -> None:
    """Ensure logging has at least basic configuration (lazy initialization)."""
    if _CURRENT_CONFIG is None:
        level = os.getenv("GRAPHQL_LINT_LOG_LEVEL", "INFO").upper()
        format_type = os.getenv("GRAPHQL_LINT_LOG_FORMAT", "console").lower()
        configure_logging(level=level, format=format_type)  # type: ignore[arg-type]
