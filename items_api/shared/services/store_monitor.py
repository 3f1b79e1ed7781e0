"""
Store Monitor

Background task that periodically logs item store statistics.
Started from the application lifespan when PERIODIC_STORE_LOG_ENABLED is set.
"""

import asyncio

from items_api.shared.core.logging import get_logger
from items_api.shared.repositories.item_store import ItemStore

logger = get_logger(__name__)


async def log_store_stats_periodically(store: ItemStore, interval_seconds: float) -> None:
    """
    Log store statistics every interval until cancelled.

    The first line is written immediately so a fresh deployment shows up in
    the logs without waiting a full interval.
    """
    while True:
        logger.info("Store statistics", **store.stats())
        await asyncio.sleep(interval_seconds)
