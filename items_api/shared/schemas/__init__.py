"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, message and error responses, health
- item: Item request and response schemas
- version: Build and version metadata

Usage:
======
    from items_api.shared.schemas.item import CreateItemRequest, ItemResponse
    from items_api.shared.schemas.common import ErrorResponse
"""

from items_api.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from items_api.shared.schemas.item import (
    CreateItemRequest,
    ItemResponse,
    ItemListResponse,
    ClearItemsResponse,
)
from items_api.shared.schemas.version import VersionInfo

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Item
    "CreateItemRequest",
    "ItemResponse",
    "ItemListResponse",
    "ClearItemsResponse",
    # Version
    "VersionInfo",
]
