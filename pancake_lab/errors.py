"""Exceptions raised by the pancake order service."""

from typing import Optional
from uuid import UUID


class PancakeLabError(Exception):
    """Base class for order service failures."""


class OrderNotFoundError(PancakeLabError):
    """Raised when an order id does not match a live order."""

    def __init__(self, order_id: Optional[UUID]):
        self.order_id = order_id
        super().__init__(f"order {order_id} not found")


class InvalidOrderStateError(PancakeLabError):
    """Raised when an operation does not fit the order's current phase."""

    def __init__(self, reason: str, order_id: Optional[UUID] = None):
        self.reason = reason
        self.order_id = order_id
        if order_id is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (order {order_id})")
