"""
Configuration Module for Pancake Lab
====================================

This module centralizes the environment-driven settings used by the order
service. Values are parsed once at import time; a `.env` file in the working
directory is honoured through python-dotenv.

Configuration Categories:
-------------------------
- **Logging**: Root log level for `setup_logging()`.

- **Order Log**: Behaviour of the in-memory audit log that receives one line
  per mutating order event (pancake added, pancakes removed, order cancelled,
  order delivered).

Environment Variables:
----------------------
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: "INFO")
- ORDER_LOG_ECHO: Forward audit lines to the Python logger (default: "true")
- ORDER_LOG_MAX_ENTRIES: Cap on retained audit lines, 0 = unbounded (default: 0)

Usage:
------
    from pancake_lab.config import ORDER_LOG_ECHO, ORDER_LOG_MAX_ENTRIES
"""

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# =============================================================================
# Order Log Configuration
# =============================================================================
# The order log is append-only and lives in memory for the lifetime of the
# process. Echoing makes the same lines visible in the application log.

ORDER_LOG_ECHO: bool = os.getenv("ORDER_LOG_ECHO", "true").lower() == "true"


def _parse_max_entries(raw: str) -> int:
    """Parse ORDER_LOG_MAX_ENTRIES, treating junk and negatives as unbounded."""
    try:
        value = int(raw)
    except ValueError:
        return 0
    return max(value, 0)


ORDER_LOG_MAX_ENTRIES: int = _parse_max_entries(os.getenv("ORDER_LOG_MAX_ENTRIES", "0"))
