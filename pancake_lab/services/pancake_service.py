"""
Pancake Order Service
=====================

Tracks pancake orders from creation to delivery or cancellation.

Order lifecycle:
----------------
    NEW -> (assembling custom)* -> ASSEMBLED -> PREPARED -> DELIVERED

- CANCELLED is reachable from any live state.
- COMPLETED is an independent flag set by ``complete_order`` at any time,
  for any id, live or not.
- ASSEMBLED is not stored: it just means no custom pancake is in progress.

Locking:
--------
Each ``OrderEntry`` owns a lock. Every operation that reads or changes an
entry's pancakes or in-progress custom pancake holds that lock for its whole
duration, so work on one order is serialized while other orders proceed in
parallel. The prepared/completed sets sit behind the status board's single
lock. When both are needed (prepare, deliver, cancel) the entry lock is taken
first and the status lock inside it; nothing takes them the other way round.

Entries removed by cancel or deliver are marked closed while still locked, so
a caller that looked the entry up just before removal sees the order as gone
instead of mutating a detached entry.

Usage:
------
    service = PancakeService(OrderLog())
    order = service.create_order(building=10, room=5)
    service.add_pancakes(order.id, FixedRecipe.DARK_CHOCOLATE, 2)
    service.prepare_order(order.id)
    delivered = service.deliver_order(order.id)
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set
from uuid import UUID

from ..errors import InvalidOrderStateError, OrderNotFoundError
from ..recipes import BasePancake, CustomPancake, FixedRecipe, PancakeIngredient
from ..schemas.orders import DeliveredOrder, Order, OrderOut
from .order_log import OrderLog
from .registry import OrderRegistry
from .status import OrderStatusBoard


logger = logging.getLogger(__name__)


@dataclass
class OrderEntry:
    """Mutable working state of one live order."""

    order: Order
    recipes: List[BasePancake] = field(default_factory=list)
    custom: Optional[CustomPancake] = None
    closed: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def id(self) -> UUID:
        return self.order.id

    def handle(self) -> OrderOut:
        return OrderOut.from_order(self.order)

    def descriptions(self) -> List[str]:
        return [recipe.description() for recipe in self.recipes]


class PancakeService:
    """Order manager enforcing the pancake order lifecycle."""

    def __init__(
        self,
        log: OrderLog,
        status: Optional[OrderStatusBoard] = None,
        registry: Optional[OrderRegistry[OrderEntry]] = None,
    ):
        self.log = log
        self.status = status if status is not None else OrderStatusBoard()
        self.registry: OrderRegistry[OrderEntry] = registry if registry is not None else OrderRegistry()

    # =========================================================================
    # Creation & assembly
    # =========================================================================

    def create_order(self, building: int, room: int) -> OrderOut:
        """Create an empty order and return its handle."""
        order = Order(building=building, room=room)
        self.registry.put(order.id, OrderEntry(order=order))
        logger.info("Created order %s for building %s, room %s", order.id, building, room)
        return OrderOut.from_order(order)

    def create_custom(self, order_id: UUID) -> None:
        """Start building a custom pancake for the order."""
        with self._locked_entry(order_id) as entry:
            if entry.custom is not None:
                raise InvalidOrderStateError("pancake in progress", order_id)
            entry.custom = CustomPancake()
            logger.debug("Started custom pancake for order %s", order_id)

    def add_ingredient(self, order_id: UUID, ingredient: PancakeIngredient) -> None:
        with self._locked_entry(order_id) as entry:
            if entry.custom is None:
                raise InvalidOrderStateError("no pancake in progress", order_id)
            entry.custom.add_ingredient(ingredient)

    def finish_custom(self, order_id: UUID) -> None:
        """Freeze the custom pancake in progress and add it to the order."""
        with self._locked_entry(order_id) as entry:
            if entry.custom is None:
                raise InvalidOrderStateError("no pancake in progress", order_id)
            custom = entry.custom
            custom.finish()
            self._add_pancake(entry, custom)
            entry.custom = None

    def add_pancakes(self, order_id: UUID, recipe: FixedRecipe, count: int) -> None:
        """
        Add ``count`` pancakes of a fixed recipe to the order.

        Each pancake is a separate instance and is logged separately. A count
        of zero or less adds nothing.
        """
        recipe = FixedRecipe(recipe)
        with self._locked_entry(order_id) as entry:
            for _ in range(count):
                self._add_pancake(entry, recipe.build())

    def add_dark_chocolate_pancake(self, order_id: UUID, count: int) -> None:
        self.add_pancakes(order_id, FixedRecipe.DARK_CHOCOLATE, count)

    def add_dark_chocolate_whipped_cream_pancake(self, order_id: UUID, count: int) -> None:
        self.add_pancakes(order_id, FixedRecipe.DARK_CHOCOLATE_WHIPPED_CREAM, count)

    def add_dark_chocolate_whipped_cream_hazelnuts_pancake(self, order_id: UUID, count: int) -> None:
        self.add_pancakes(order_id, FixedRecipe.DARK_CHOCOLATE_WHIPPED_CREAM_HAZELNUTS, count)

    def add_milk_chocolate_pancake(self, order_id: UUID, count: int) -> None:
        self.add_pancakes(order_id, FixedRecipe.MILK_CHOCOLATE, count)

    def add_milk_chocolate_hazelnuts_pancake(self, order_id: UUID, count: int) -> None:
        self.add_pancakes(order_id, FixedRecipe.MILK_CHOCOLATE_HAZELNUTS, count)

    # =========================================================================
    # Viewing & removal
    # =========================================================================

    def view_order(self, order_id: Optional[UUID]) -> List[str]:
        """
        Return the descriptions of the order's pancakes in insertion order.

        Unknown, removed or None ids give an empty list rather than an error.
        """
        entry = self.registry.get(order_id)
        if entry is None:
            return []
        with entry.lock:
            if entry.closed:
                return []
            return entry.descriptions()

    def remove_pancakes(self, description: str, order_id: UUID, count: int) -> None:
        """
        Remove up to ``count`` pancakes whose description equals ``description``.

        Matches are removed front to back; the remaining pancakes keep their
        order. The number actually removed is logged.
        """
        with self._locked_entry(order_id) as entry:
            kept: List[BasePancake] = []
            removed = 0
            for recipe in entry.recipes:
                if removed < count and recipe.description() == description:
                    removed += 1
                else:
                    kept.append(recipe)
            entry.recipes = kept
            self.log.log_remove_pancakes(entry.handle(), description, removed, entry.descriptions())

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def cancel_order(self, order_id: UUID) -> None:
        """Drop the order and clear it from both status sets."""
        with self._locked_entry(order_id) as entry:
            self._close(entry)
            self.status.forget(order_id)
            self.log.log_cancel_order(entry.handle(), entry.descriptions())
            logger.info("Cancelled order %s", order_id)

    def complete_order(self, order_id: UUID) -> None:
        """
        Flag the order id as completed.

        Accepts any id, including ones that were never created, already
        delivered or never prepared, and does not touch the prepared set.
        """
        self.status.mark_completed(order_id)

    def list_completed_orders(self) -> Set[UUID]:
        return self.status.completed()

    def prepare_order(self, order_id: UUID) -> None:
        """Mark the order ready for delivery (and no longer completed)."""
        with self._locked_entry(order_id) as entry:
            if entry.custom is not None:
                raise InvalidOrderStateError("custom recipe was not finished", order_id)
            self.status.mark_prepared(order_id)
            logger.info("Prepared order %s", order_id)

    def list_prepared_orders(self) -> Set[UUID]:
        return self.status.prepared()

    def deliver_order(self, order_id: UUID) -> Optional[DeliveredOrder]:
        """
        Send a prepared order out for delivery.

        Returns None without changing anything if the order is not prepared.
        Otherwise the order leaves the registry and the prepared set.
        """
        with self._locked_entry(order_id) as entry:
            if not self.status.is_prepared(order_id):
                logger.debug("Order %s is not prepared, not delivering", order_id)
                return None

            pancakes = entry.descriptions()
            handle = entry.handle()
            self.log.log_deliver_order(handle, pancakes)

            self._close(entry)
            self.status.discard_prepared(order_id)
            logger.info("Delivered order %s with %d pancakes", order_id, len(pancakes))
            return DeliveredOrder(order=handle, pancakes=pancakes)

    # =========================================================================
    # Internals
    # =========================================================================

    @contextmanager
    def _locked_entry(self, order_id: Optional[UUID]) -> Iterator[OrderEntry]:
        """Resolve a live entry and hold its lock, or raise OrderNotFoundError."""
        entry = self.registry.get(order_id)
        if entry is None:
            raise OrderNotFoundError(order_id)
        with entry.lock:
            if entry.closed:
                raise OrderNotFoundError(order_id)
            yield entry

    def _close(self, entry: OrderEntry) -> None:
        # Caller holds entry.lock
        entry.closed = True
        self.registry.remove(entry.id)

    def _add_pancake(self, entry: OrderEntry, pancake: BasePancake) -> None:
        # Caller holds entry.lock
        pancake.order_id = entry.id
        entry.recipes.append(pancake)
        self.log.log_add_pancake(entry.handle(), pancake.description(), entry.descriptions())
