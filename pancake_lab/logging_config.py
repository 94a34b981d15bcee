"""
Logging setup for pancake_lab.

Usage:
    from pancake_lab.logging_config import setup_logging
    setup_logging()  # once, at startup

The default level comes from ``pancake_lab.config.LOG_LEVEL``, so a
LOG_LEVEL in the environment or in a ``.env`` file applies here.
"""
import logging
import sys

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = None) -> None:
    """
    Configure the root handler and the ``pancake_lab`` logger level.

    Args:
        level: One of LEVEL_NAMES, case-insensitive. Defaults to
               config.LOG_LEVEL; unknown names fall back to INFO.
    """
    if level is None:
        from . import config
        level = config.LOG_LEVEL

    level_name = level.upper() if level.upper() in LEVEL_NAMES else "INFO"
    numeric_level = getattr(logging, level_name)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("pancake_lab").setLevel(numeric_level)

    logging.getLogger(__name__).debug("pancake_lab logging at %s", level_name)
