"""
Schemas Package for Pancake Lab
===============================

Pydantic models that cross the service boundary. Callers never receive the
service's internal order entries; they get these read-only projections.

Naming Conventions:
-------------------
- *Out: Read-only handle returned to callers (e.g., OrderOut)
- Plain names: immutable records (e.g., Order, DeliveredOrder)
"""

from .orders import DeliveredOrder, Order, OrderOut

__all__ = ["DeliveredOrder", "Order", "OrderOut"]
