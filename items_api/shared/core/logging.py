"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Local:
    2024-01-15 10:30:00 [info     ] Item created                   name=esgrove id=1000

Other environments (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Item created", "name": "esgrove"}

Features:
=========
- Structured key-value logging
- Context variables (request_id, method and path on every request log line)
- Colored console output when running locally
- JSON output everywhere else
- Automatic timestamp and log level

Usage:
======
    from items_api.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Item created", name=name, id=item_id)

    # Get named logger
    store_logger = get_logger("store")
    store_logger.debug("Shard locked", shard=index)

    # Add context to all subsequent logs
    log_context(request_id=request_id)
    logger.info("Processing request")  # Includes request_id
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from items_api.config.settings import settings

# CLI names that differ from the stdlib level names
_LEVEL_ALIASES = {
    "TRACE": "DEBUG",
    "WARN": "WARNING",
}


def resolve_log_level(level: str) -> int:
    """Map a level name (including trace and warn) to a stdlib level."""
    name = level.upper()
    name = _LEVEL_ALIASES.get(name, name)
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return resolved


def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - Local: Colored console output for readability
    - Everything else: JSON output for log aggregation systems

    Called automatically when this module is imported; the CLI calls it
    again to apply the --log level.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_format: Force JSON output on or off, defaults to "not local"
    """
    if json_format is None:
        json_format = not settings.is_local

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=resolve_log_level(level or settings.LOG_LEVEL),
        force=True,
    )

    # Shared processors for all environments
    shared_processors: list[Processor] = [
        # Merge context variables from contextvars
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context is stored in context variables and automatically included
    in all log messages until cleared or the request ends.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Call this at the end of request processing to prevent
    context from leaking to other requests.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("items_api")
