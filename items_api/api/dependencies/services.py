"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold a reference to the shared store)
- The store itself is created once per application

Usage:
======
    from items_api.api.dependencies.services import get_item_service

    @router.get("/items")
    def list_items(item_service: ItemService = Depends(get_item_service)):
        return item_service.list_items()
"""

from fastapi import Depends

from items_api.api.dependencies.state import get_item_store
from items_api.shared.repositories.item_store import ItemStore
from items_api.shared.services.item_service import ItemService


def get_item_service(
    store: ItemStore = Depends(get_item_store),
) -> ItemService:
    """
    Dependency to get ItemService instance.

    Creates a new service instance per request around the shared store.
    """
    return ItemService(store)
