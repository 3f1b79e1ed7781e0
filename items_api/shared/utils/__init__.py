"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- constants: Application constants
- security: API key verification
- version: Build and version metadata

Usage:
======
    from items_api.shared.utils.security import SecurityUtils
    from items_api.shared.utils.constants import API_KEY_HEADER
"""

from items_api.shared.utils.constants import (
    API_KEY_HEADER,
    CONFIG_FILE_NAME,
    DEFAULT_API_KEY,
    LOG_LEVELS,
    REQUEST_ID_HEADER,
)
from items_api.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
    "API_KEY_HEADER",
    "CONFIG_FILE_NAME",
    "DEFAULT_API_KEY",
    "LOG_LEVELS",
    "REQUEST_ID_HEADER",
]
