"""
Item Schemas

Request/response models for the item and admin endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from items_api.shared.schemas.common import BaseSchema


class CreateItemRequest(BaseModel):
    """Post payload for creating a new item."""

    name: str = Field(examples=["esgrove"])
    # Clients may pick an id or let the server assign one
    id: Optional[int] = Field(
        default=None,
        ge=0,
        examples=[1234],
        description="Optional id; assigned by the server when omitted",
    )


class ItemResponse(BaseSchema):
    """Schema for a single item."""

    id: int = Field(examples=[1234])
    name: str = Field(examples=["esgrove"])
    created_at: datetime


class ItemListResponse(BaseModel):
    """All items, sorted by name."""

    num_items: int = Field(examples=[5], description="The total number of items")
    names: list[str] = Field(description="List of all names")
    items: list[ItemResponse]


class ClearItemsResponse(BaseModel):
    """Result of removing every item."""

    message: str = Field(examples=["Removed 5 items"])
    num_removed: int = Field(examples=[5])
