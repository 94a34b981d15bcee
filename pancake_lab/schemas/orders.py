"""
Order Schemas for Pancake Lab
=============================

Order Lifecycle:
----------------
1. **New**: Created with a building and room, no pancakes yet
2. **Assembling**: Pancakes added from fixed recipes or built up as custom
3. **Prepared**: Ready for delivery pickup
4. **Delivered** / **Cancelled**: Terminal, the order leaves the service

"Completed" is tracked separately as an audit flag and can be set at any time.

Data Model:
-----------
``Order`` is the immutable record stored by the service. ``OrderOut`` is the
handle returned to callers (id, building, room). ``DeliveredOrder`` is the
result of a successful delivery.

Building and room numbers are taken as given; no range validation is done.
"""

import uuid
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """Immutable order record with a freshly generated id."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    building: int
    room: int


class OrderOut(BaseModel):
    """
    Read-only order handle returned to callers.

    Attributes:
        id: Order identifier to pass back into service calls
        building: Building number the order is delivered to
        room: Room number the order is delivered to
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    building: int
    room: int

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls(id=order.id, building=order.building, room=order.room)

    def to_order(self) -> Order:
        """Build a new order for the same location (gets a new id)."""
        return Order(building=self.building, room=self.room)


class DeliveredOrder(BaseModel):
    """Handle plus the rendered pancake descriptions that went out."""

    model_config = ConfigDict(frozen=True)

    order: OrderOut
    pancakes: List[str]
