"""
In-memory registry of live order entries.

All structural operations take the registry's internal lock, so insert,
lookup and remove are safe from any thread. The lock only protects the
mapping itself; callers that read or change an entry's contents must hold
that entry's own lock.
"""

import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar
from uuid import UUID


logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT")


class OrderRegistry(Generic[EntryT]):
    """Thread-safe mapping of order id to order entry."""

    def __init__(self) -> None:
        self._entries: Dict[UUID, EntryT] = {}
        self._lock = threading.Lock()

    def put(self, order_id: UUID, entry: EntryT) -> None:
        """Insert an entry, silently replacing any entry with the same id."""
        with self._lock:
            if order_id in self._entries:
                logger.warning("Replacing existing registry entry for order %s", order_id)
            self._entries[order_id] = entry

    def get(self, order_id: Optional[UUID]) -> Optional[EntryT]:
        """Return the entry for order_id, or None if absent."""
        if order_id is None:
            return None
        with self._lock:
            return self._entries.get(order_id)

    def remove(self, order_id: UUID) -> None:
        """Drop the entry for order_id; no-op if absent."""
        with self._lock:
            self._entries.pop(order_id, None)

    def ids(self) -> List[UUID]:
        """Snapshot of the ids currently registered."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, order_id: object) -> bool:
        with self._lock:
            return order_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
