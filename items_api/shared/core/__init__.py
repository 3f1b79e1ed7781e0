"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from items_api.shared.core.logging import logger, get_logger
    from items_api.shared.core.exceptions import ItemsApiException, ItemNotFoundError

    logger.info("Item created", name=name)
"""

from items_api.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
    setup_logging,
)
from items_api.shared.core.exceptions import (
    ItemsApiException,
    AuthenticationError,
    NotFoundError,
    ItemNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateItemError,
    DuplicateItemIdError,
    UnsupportedMediaTypeError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    "setup_logging",
    # Exceptions
    "ItemsApiException",
    "AuthenticationError",
    "NotFoundError",
    "ItemNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateItemError",
    "DuplicateItemIdError",
    "UnsupportedMediaTypeError",
]
