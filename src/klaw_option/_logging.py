"""Structured logging for klaw-option.

The library never configures logging on import. Loggers returned by
get_logger() wrap a stdlib logger, so records are dropped by the stdlib
level filter until the host application (or configure_logging()) installs
a handler. configure_logging() uses structlog's ProcessorFormatter so both
structlog and stdlib records share one rendering pipeline.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = ['configure_logging', 'get_logger']

LOGGER_NAME = 'klaw_option'


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter and attach a stderr handler.

    Only the ``klaw_option`` logger hierarchy is touched; the root logger
    and its handlers are left to the application.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    import structlog

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger.

    Args:
        name: Logger name. Defaults to the package logger.

    Returns:
        A lazily configured structlog BoundLogger.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
