"""
Data Access Layer

Repositories own the application's state and expose a narrow set of
operations over it. There is no database; items live in memory for the
lifetime of the process.

Usage:
======
    from items_api.shared.repositories import ItemStore

    store = ItemStore()
    store.insert("esgrove")
"""

from items_api.shared.repositories.item_store import IdAllocator, ItemStore

__all__ = [
    "ItemStore",
    "IdAllocator",
]
