"""Structured logging configuration for GraphQL request options.

This module provides structured logging using structlog. Request options
log only at their edges: when configuration is loaded, when a builder is
frozen into a cache key, and when a method is rejected. Equality and
hashing never log, since they run on every cache lookup.

Examples:
    Configure logging::

        from graphql_request_options.observability.logging import configure_logging

        configure_logging(level="DEBUG", json_output=False)

    Use the logger::

        from graphql_request_options.observability.logging import get_logger

        logger = get_logger(__name__)
        logger.debug("request_options.frozen", http_method="POST", header_count=2)
"""

import logging
import sys
from typing import Any

import structlog


def _processors(json_output: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure structured logging for the application.

    Call once at startup, usually through
    ``RequestOptionsConfig.configure_logging()``. Applications that already
    configure structlog can skip this; the module loggers pick up whatever
    configuration is active.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, emit JSON logs; if False, use console format

    Examples:
        >>> configure_logging(level="DEBUG", json_output=False)
    """
    levels = logging.getLevelNamesMapping()
    if level.upper() not in levels:
        raise ValueError(
            f"Invalid log level: {level}. Valid levels are: {', '.join(sorted(levels))}"
        )
    numeric_level = levels[level.upper()]
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        A structlog logger instance
    """
    return structlog.get_logger(name)
