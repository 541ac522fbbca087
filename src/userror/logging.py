"""Structured logging for userror's own diagnostics using structlog.

These are library internals (name lookup fallbacks, write failures), not the
user-facing lines the printer writes. Loggers wrap the stdlib ``userror``
logger, which carries a ``NullHandler`` so nothing is emitted unless the host
program calls :func:`configure_logging` or configures stdlib logging itself.
"""

from __future__ import annotations

import logging as stdlib_logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

ROOT_LOGGER_NAME = "userror"

stdlib_logging.getLogger(ROOT_LOGGER_NAME).addHandler(stdlib_logging.NullHandler())

_stderr_handler: stdlib_logging.Handler | None = None


def add_log_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the log level to the event dict."""
    if method_name == "warn":
        # Translate "warn" to "warning"
        event_dict["level"] = "warning"
    else:
        event_dict["level"] = method_name
    return event_dict


def _processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=False),
    ]


def configure_logging(level: str | None = None) -> None:
    """Send userror's own log events to stderr.

    Calling this more than once only updates the level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults
            to the USERROR_LOG_LEVEL setting.
    """
    global _stderr_handler

    if level is None:
        from userror.config import get_settings

        level = get_settings().log_level

    logger = stdlib_logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(stdlib_logging, level.upper(), stdlib_logging.WARNING))

    if _stderr_handler is None:
        _stderr_handler = stdlib_logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(stdlib_logging.Formatter("%(message)s"))
        logger.addHandler(_stderr_handler)


def reset_logging() -> None:
    """Undo :func:`configure_logging` (useful for testing)."""
    global _stderr_handler

    logger = stdlib_logging.getLogger(ROOT_LOGGER_NAME)
    if _stderr_handler is not None:
        logger.removeHandler(_stderr_handler)
        _stderr_handler = None
    logger.setLevel(stdlib_logging.NOTSET)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger for a userror module.

    Args:
        name: Optional logger name. Defaults to the package logger.

    Returns:
        structlog logger bound to the stdlib logger of the same name.
    """
    return structlog.wrap_logger(
        stdlib_logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
