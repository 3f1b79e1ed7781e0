"""
Item Handler

Public item endpoints that anyone can call.

ARCHITECTURE:
=============
    Handler → Service → Store

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Validation rules and conflict detection belong in the SERVICE layer;
failures surface as application exceptions and are rendered by the
error handler middleware.

The handlers are plain functions, so FastAPI runs them in its worker
threadpool and concurrent requests hit the store from several threads.
"""

from fastapi import APIRouter, Depends, Query, status

from items_api.api.dependencies.content_type import require_json_content_type
from items_api.api.dependencies.services import get_item_service
from items_api.shared.schemas.common import ErrorResponse
from items_api.shared.schemas.item import (
    CreateItemRequest,
    ItemListResponse,
    ItemResponse,
)
from items_api.shared.services.item_service import ItemService


router = APIRouter()


@router.get("/items", response_model=ItemListResponse)
def list_items(
    item_service: ItemService = Depends(get_item_service),
):
    """List all items, sorted by name."""
    items = item_service.list_items()
    return ItemListResponse(
        num_items=len(items),
        names=[item.name for item in items],
        items=[ItemResponse.model_validate(item) for item in items],
    )


@router.get(
    "/item",
    response_model=ItemResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Item does not exist"},
    },
)
def query_item(
    name: str = Query(..., description="Exact item name", examples=["esgrove"]),
    item_service: ItemService = Depends(get_item_service),
):
    """
    Get item info.

    Looks the item up by its exact, case-sensitive name.
    """
    item = item_service.get_item(name)
    return ItemResponse.model_validate(item)


@router.post(
    "/items",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content_type)],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Malformed JSON or blank name"},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Item name or id already exists"},
        status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ErrorResponse, "description": "Missing JSON content type header"},
    },
)
def create_item(
    request: CreateItemRequest,
    item_service: ItemService = Depends(get_item_service),
):
    """
    Create new item.

    The id is optional; the server assigns the next free id when omitted.
    """
    item = item_service.create_item(request.name, request.id)
    return ItemResponse.model_validate(item)
