"""
Admin Handler

Destructive item endpoints that require the api-key header.

Every route takes the AdminKey dependency, so the key is verified before
the service is asked to mutate anything. Unknown names therefore answer
401 without a key, never 404.
"""

from fastapi import APIRouter, Depends, status

from items_api.api.dependencies.auth import AdminKey
from items_api.api.dependencies.services import get_item_service
from items_api.shared.schemas.common import ErrorResponse
from items_api.shared.schemas.item import ClearItemsResponse, ItemResponse
from items_api.shared.services.item_service import ItemService


router = APIRouter(
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or invalid api-key"},
    },
)


@router.delete("/clear_items", response_model=ClearItemsResponse)
def delete_all_items(
    _api_key: AdminKey,
    item_service: ItemService = Depends(get_item_service),
):
    """Remove all items and report how many were deleted."""
    removed = item_service.clear_items()
    return ClearItemsResponse(
        message=f"Removed {removed} items",
        num_removed=removed,
    )


@router.delete(
    "/remove/{name}",
    response_model=ItemResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Item does not exist"},
    },
)
def remove_item(
    name: str,
    _api_key: AdminKey,
    item_service: ItemService = Depends(get_item_service),
):
    """Remove item with given name."""
    item = item_service.remove_item(name)
    return ItemResponse.model_validate(item)
