"""
API Handlers

Route handlers for the items API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from items_api.api.handlers import (
    admin_handler,
    health_handler,
    item_handler,
)

__all__ = [
    "admin_handler",
    "health_handler",
    "item_handler",
]
