"""
Append-only audit log of order events.

The order service notifies the log once per mutating event while it holds
the order's lock. Each call appends one line and returns immediately; the
log never calls back into the service.

Lines are kept in memory (optionally capped by ORDER_LOG_MAX_ENTRIES) and,
when ORDER_LOG_ECHO is on, also written to this module's logger at INFO.

Echo runs inside the caller's order lock, so a slow log handler (for
example a blocked stdout) slows that order down. Turn ORDER_LOG_ECHO off
under heavy load; the in-memory lines are kept either way.
"""

import logging
import threading
from collections import deque
from typing import Deque, List, Optional, Sequence

from ..config import ORDER_LOG_ECHO, ORDER_LOG_MAX_ENTRIES
from ..schemas.orders import OrderOut


logger = logging.getLogger(__name__)


class OrderLog:
    """Thread-safe, in-memory order event log."""

    def __init__(self, echo: Optional[bool] = None, max_entries: Optional[int] = None):
        if echo is None:
            echo = ORDER_LOG_ECHO
        if max_entries is None:
            max_entries = ORDER_LOG_MAX_ENTRIES
        self._echo = echo
        self._lines: Deque[str] = deque(maxlen=max_entries or None)
        self._lock = threading.Lock()

    def log_add_pancake(self, order: OrderOut, description: str, pancakes: Sequence[str]) -> None:
        self._append(
            f"Added pancake with description '{description}' "
            f"to order {order.id} containing {len(pancakes)} pancakes, "
            f"for building {order.building}, room {order.room}."
        )

    def log_remove_pancakes(
        self,
        order: OrderOut,
        description: str,
        count: int,
        pancakes: Sequence[str],
    ) -> None:
        self._append(
            f"Removed {count} pancake(s) with description '{description}' "
            f"from order {order.id} now containing {len(pancakes)} pancakes, "
            f"for building {order.building}, room {order.room}."
        )

    def log_cancel_order(self, order: OrderOut, pancakes: Sequence[str]) -> None:
        self._append(
            f"Cancelled order {order.id} with {len(pancakes)} pancakes "
            f"for building {order.building}, room {order.room}."
        )

    def log_deliver_order(self, order: OrderOut, pancakes: Sequence[str]) -> None:
        self._append(
            f"Order {order.id} with {len(pancakes)} pancakes "
            f"for building {order.building}, room {order.room} out for delivery."
        )

    def entries(self) -> List[str]:
        """Snapshot of the retained log lines, oldest first."""
        with self._lock:
            return list(self._lines)

    def text(self) -> str:
        """The retained log as newline-terminated text."""
        with self._lock:
            return "".join(f"{line}\n" for line in self._lines)

    def _append(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)
        if self._echo:
            logger.info("%s", line)
