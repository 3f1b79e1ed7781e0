"""
Item Store

In-memory, thread-safe map from item name to Item. This is the only shared
mutable state in the process and the data access layer for every route.

What This Provides:
===================
- insert(name, id)  → Add a new item, assigning an id when none is given
- get(name)         → Fetch single item by name
- remove(name)      → Remove and return an item
- clear()           → Remove everything, return how many were removed
- list()            → Snapshot of all items, sorted by name
- stats()           → Counters for the periodic store log

Locking Layout:
===============
┌─────────────────────────────────────────────────────────────────────────────┐
│                            ITEM STORE                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   hash(name) % shard_count                                                  │
│          │                                                                  │
│          ▼                                                                  │
│   ┌──────────┐ ┌──────────┐ ┌──────────┐        ┌──────────┐               │
│   │ shard 0  │ │ shard 1  │ │ shard 2  │  ...   │ shard N-1│               │
│   │ lock+dict│ │ lock+dict│ │ lock+dict│        │ lock+dict│               │
│   └──────────┘ └──────────┘ └──────────┘        └──────────┘               │
│          │                                                                  │
│          ▼                                                                  │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │ IdAllocator: lock + next counter + set of ids in use        │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lock order is always shard locks in ascending index, then the id allocator.
Single-key operations take one shard lock; clear() and list() take all of
them so they observe a consistent snapshot.

Usage:
======
    from items_api.shared.repositories.item_store import ItemStore

    store = ItemStore(shard_count=16, id_start=1000)
    item = store.insert("esgrove")        # Item(id=1000, name="esgrove", ...)
    store.insert("esgrove")               # raises DuplicateItemError
    store.remove("esgrove")               # returns the removed Item
"""

import threading
from contextlib import ExitStack, contextmanager
from typing import Dict, Iterator, List, Optional, Set

from items_api.shared.core.exceptions import DuplicateItemError, DuplicateItemIdError
from items_api.shared.models.item import Item


class IdAllocator:
    """
    Hands out unique item ids.

    Server-assigned ids come from a counter that only moves forward, so an id
    is never handed out twice even after its item is deleted. Ids supplied by
    clients are tracked in the same set so the counter skips over them.
    """

    def __init__(self, start: int = 1000) -> None:
        self._lock = threading.Lock()
        self._next = start
        self._in_use: Set[int] = set()

    def claim(self, item_id: Optional[int] = None) -> int:
        """
        Reserve an id.

        Args:
            item_id: Client supplied id, or None to assign the next free one

        Returns:
            The reserved id

        Raises:
            DuplicateItemIdError: If the supplied id is already in use
        """
        with self._lock:
            if item_id is None:
                while self._next in self._in_use:
                    self._next += 1
                item_id = self._next
                self._next += 1
            elif item_id in self._in_use:
                raise DuplicateItemIdError(item_id)
            self._in_use.add(item_id)
            return item_id

    def release(self, item_id: int) -> None:
        with self._lock:
            self._in_use.discard(item_id)

    def release_all(self) -> None:
        with self._lock:
            self._in_use.clear()


class _Shard:
    """One lock stripe of the store."""

    __slots__ = ("lock", "items")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.items: Dict[str, Item] = {}


class ItemStore:
    """
    Sharded concurrent map of items keyed by name.

    All methods are safe to call from many threads at once; callers never
    need their own locking.

    Attributes:
        shard_count: Number of independently locked shards
    """

    def __init__(self, shard_count: int = 16, id_start: int = 1000) -> None:
        if shard_count < 1:
            raise ValueError("shard_count must be at least 1")
        self.shard_count = shard_count
        self._shards = [_Shard() for _ in range(shard_count)]
        self._ids = IdAllocator(start=id_start)

    def _shard_for(self, name: str) -> _Shard:
        return self._shards[hash(name) % self.shard_count]

    @contextmanager
    def _all_shards_locked(self) -> Iterator[List[_Shard]]:
        with ExitStack() as stack:
            for shard in self._shards:
                stack.enter_context(shard.lock)
            yield self._shards

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def insert(self, name: str, item_id: Optional[int] = None) -> Item:
        """
        Insert a new item.

        The name check, id reservation and insert happen under the name's
        shard lock, so when two callers race on the same name exactly one
        of them wins.

        Args:
            name: Item name, compared exactly
            item_id: Optional client supplied id

        Returns:
            The stored item

        Raises:
            DuplicateItemError: If an item with this name exists
            DuplicateItemIdError: If the supplied id is already in use
        """
        shard = self._shard_for(name)
        with shard.lock:
            if name in shard.items:
                raise DuplicateItemError(name)
            assigned_id = self._ids.claim(item_id)
            item = Item(id=assigned_id, name=name)
            shard.items[name] = item
            return item

    def remove(self, name: str) -> Optional[Item]:
        """
        Remove an item by name.

        Returns:
            The removed item, or None if no item had this name
        """
        shard = self._shard_for(name)
        with shard.lock:
            item = shard.items.pop(name, None)
            if item is not None:
                self._ids.release(item.id)
            return item

    def clear(self) -> int:
        """
        Remove all items.

        Returns:
            Number of items removed
        """
        with self._all_shards_locked() as shards:
            removed = 0
            for shard in shards:
                removed += len(shard.items)
                shard.items.clear()
            self._ids.release_all()
            return removed

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, name: str) -> Optional[Item]:
        """Fetch an item by exact name."""
        shard = self._shard_for(name)
        with shard.lock:
            return shard.items.get(name)

    def list(self) -> List[Item]:
        """
        Snapshot of all items, sorted by name.

        Items are immutable, so the returned list can be used freely after
        the locks are released.
        """
        with self._all_shards_locked() as shards:
            items = [item for shard in shards for item in shard.items.values()]
        return sorted(items, key=lambda item: item.name)

    def __len__(self) -> int:
        with self._all_shards_locked() as shards:
            return sum(len(shard.items) for shard in shards)

    def stats(self) -> Dict[str, int]:
        """Item count and shard fill for monitoring."""
        with self._all_shards_locked() as shards:
            sizes = [len(shard.items) for shard in shards]
        return {
            "num_items": sum(sizes),
            "shard_count": self.shard_count,
            "largest_shard": max(sizes),
        }
