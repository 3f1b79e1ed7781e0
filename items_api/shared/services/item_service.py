"""
Item Service

Business logic for creating, reading and removing items.

Service Pattern:
================
    Handler → ItemService → ItemStore

The service owns the acceptance rules for new items; the store owns
atomicity. Handlers never touch the store directly.

Rules:
======
- Name must contain something other than whitespace. It is stored and
  compared exactly as sent (case-sensitive, not trimmed).
- A client supplied id is used as-is but must not collide with an existing
  id. Without one, the store assigns the next id from its counter.
- A duplicate name is a conflict, never an overwrite.

Usage:
======
    from items_api.shared.services.item_service import ItemService

    service = ItemService(store)
    item = service.create_item("esgrove")
"""

from typing import List, Optional

from items_api.shared.core.exceptions import ItemNotFoundError, ValidationError
from items_api.shared.core.logging import get_logger
from items_api.shared.models.item import Item
from items_api.shared.repositories.item_store import ItemStore

logger = get_logger(__name__)


class ItemService:
    """
    Service for item business logic.

    Attributes:
        store: Shared ItemStore instance
    """

    def __init__(self, store: ItemStore) -> None:
        self.store = store

    @staticmethod
    def validate_name(name: str) -> str:
        """
        Check that a name is usable as an item key.

        Raises:
            ValidationError: If the name is empty or only whitespace
        """
        if not name.strip():
            raise ValidationError(
                "Item name must not be empty",
                details={"field": "name"},
            )
        return name

    def create_item(self, name: str, item_id: Optional[int] = None) -> Item:
        """
        Create a new item.

        Args:
            name: Item name
            item_id: Optional client supplied id

        Returns:
            The created item

        Raises:
            ValidationError: If the name is blank
            DuplicateItemError: If the name is taken
            DuplicateItemIdError: If the supplied id is taken
        """
        self.validate_name(name)
        item = self.store.insert(name, item_id)
        logger.debug("Create item", name=item.name, id=item.id)
        return item

    def get_item(self, name: str) -> Item:
        """
        Get an item by exact name.

        Raises:
            ItemNotFoundError: If no item has this name
        """
        item = self.store.get(name)
        if item is None:
            raise ItemNotFoundError(name)
        return item

    def list_items(self) -> List[Item]:
        """All items sorted by name."""
        items = self.store.list()
        logger.debug("List items", num_items=len(items))
        return items

    def remove_item(self, name: str) -> Item:
        """
        Remove an item by name.

        Raises:
            ItemNotFoundError: If no item has this name
        """
        item = self.store.remove(name)
        if item is None:
            raise ItemNotFoundError(name)
        logger.info("Removed item", name=item.name, id=item.id)
        return item

    def clear_items(self) -> int:
        """Remove all items and return how many were removed."""
        removed = self.store.clear()
        logger.info("Removed all items", num_removed=removed)
        return removed
