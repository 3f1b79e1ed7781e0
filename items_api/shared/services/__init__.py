"""
Business Logic Services

Services encapsulate business logic and coordinate with the item store.

Service Pattern:
================
    Handler → Service → Store

Services should:
- Contain business logic and validation
- Raise application exceptions for every failure outcome
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- ItemService: Item creation, lookup and removal
- log_store_stats_periodically: Background statistics logging

Usage:
======
    from items_api.shared.services import ItemService

    service = ItemService(store)
    item = service.create_item("esgrove")
"""

from items_api.shared.services.item_service import ItemService
from items_api.shared.services.store_monitor import log_store_stats_periodically

__all__ = [
    "ItemService",
    "log_store_stats_periodically",
]
