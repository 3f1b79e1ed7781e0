"""
Domain Models

In-memory domain objects held by the item store.

Models Overview:
================
- Item: Named item with a unique id and creation timestamp

Usage:
======
    from items_api.shared.models import Item

    item = Item(id=1000, name="esgrove")
"""

from items_api.shared.models.item import Item, utc_now

__all__ = [
    "Item",
    "utc_now",
]
