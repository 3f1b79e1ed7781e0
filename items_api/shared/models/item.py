"""
Item Model

The single stored entity. Items are immutable once created, so the store
can hand the same instance to any number of readers without copying.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Item:
    """
    Named item.

    Attributes:
        id: Unique integer id, client supplied or assigned by the store
        name: Unique natural key, compared exactly (case-sensitive)
        created_at: When the item was inserted
    """

    id: int
    name: str
    created_at: datetime = field(default_factory=utc_now)
