"""
Prepared / completed status tracking.

Both sets live behind one lock so that moves between them are atomic. Ids
stay in these sets independently of whether the order is still registered:
an order can be marked completed after it was delivered.
"""

import threading
from typing import Set
from uuid import UUID


class OrderStatusBoard:
    """Holds the prepared and completed order id sets."""

    def __init__(self) -> None:
        self._prepared: Set[UUID] = set()
        self._completed: Set[UUID] = set()
        self._lock = threading.Lock()

    def mark_prepared(self, order_id: UUID) -> None:
        """Move order_id out of completed and into prepared in one step."""
        with self._lock:
            self._completed.discard(order_id)
            self._prepared.add(order_id)

    def mark_completed(self, order_id: UUID) -> None:
        # Leaves the prepared set untouched
        with self._lock:
            self._completed.add(order_id)

    def is_prepared(self, order_id: UUID) -> bool:
        with self._lock:
            return order_id in self._prepared

    def discard_prepared(self, order_id: UUID) -> None:
        with self._lock:
            self._prepared.discard(order_id)

    def forget(self, order_id: UUID) -> None:
        """Remove order_id from both sets."""
        with self._lock:
            self._completed.discard(order_id)
            self._prepared.discard(order_id)

    def prepared(self) -> Set[UUID]:
        with self._lock:
            return set(self._prepared)

    def completed(self) -> Set[UUID]:
        with self._lock:
            return set(self._completed)
