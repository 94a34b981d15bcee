"""
Services Package for Pancake Lab
================================

- **pancake_service**: The order manager and its per-order entries
- **registry**: Thread-safe map of live orders
- **status**: Prepared / completed id sets behind one lock
- **order_log**: Append-only audit log of order events

Usage:
------
    from pancake_lab.services import OrderLog, PancakeService

    service = PancakeService(OrderLog())
"""

from .order_log import OrderLog
from .pancake_service import OrderEntry, PancakeService
from .registry import OrderRegistry
from .status import OrderStatusBoard

__all__ = ["OrderEntry", "OrderLog", "OrderRegistry", "OrderStatusBoard", "PancakeService"]
