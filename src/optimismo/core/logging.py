"""Structured logging with structlog.

JSON output for machine consumption, readable console output for humans.
Every entry carries an ISO timestamp, level, logger name and bound context.
"""

from __future__ import annotations

import logging
import sys

import structlog

from optimismo.core.config import LogFormat, get_settings

LOGGER_NAMESPACE = "optimismo"


def configure_library_logging() -> None:
    """Route events through stdlib logging under the ``optimismo`` namespace.

    Used when the package is imported as a library: nothing is printed
    unless the host application attaches handlers. An existing structlog
    configuration is left untouched.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    if not any(isinstance(h, logging.NullHandler) for h in namespace_logger.handlers):
        namespace_logger.addHandler(logging.NullHandler())


def setup_logging(level: str | None = None, fmt: LogFormat | None = None) -> None:
    """Configure structlog on top of stdlib logging for the CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Default: settings.
        fmt: Output format (json or console). Default: settings.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    log_format = fmt or settings.log_format

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # Scores go to stdout, so diagnostics go to stderr.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, **initial_context: str) -> structlog.stdlib.BoundLogger:
    """Return a logger with optional bound context.

    Args:
        name: Logger name below the package namespace (e.g. "scoring").
        **initial_context: Extra context bound to every entry.

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(f"{LOGGER_NAMESPACE}.{name}")
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
