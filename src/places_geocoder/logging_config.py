"""Structured logging configuration using structlog.

The library only asks for loggers; applications (and the bundled CLI) call
``configure_logging()`` once at startup. Output is controlled by:

    LOG_FORMAT: "json" (default) or "text"
    LOG_LEVEL:  "DEBUG", "INFO" (default), "WARNING", "ERROR"

Example:
    LOG_FORMAT=text LOG_LEVEL=DEBUG places-geocoder "Rochester, Kent"
"""

import os
import sys
import logging
from typing import TextIO, Optional

import structlog


def _rename_event_to_message(logger, method_name, event_dict):
    """Rename 'event' key to 'message' for consistency with standard logging."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(stream: Optional[TextIO] = None) -> None:
    """Configure structured logging based on environment variables.

    Args:
        stream: Optional output stream for testing. If None, uses sys.stderr.
    """
    log_format = os.getenv("LOG_FORMAT", "json").lower()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # stdout carries CLI results, so logs go to stderr
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        _rename_event_to_message,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def _route_to_stdlib() -> None:
    """Send records through stdlib logging until the application configures structlog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    _route_to_stdlib()
