"""
Centralized logging configuration for dockside.
"""

import logging
import sys

from dockside.config.constants import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "dockside"


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger sharing the package handler
    """
    _root_logger()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Change the level for every dockside logger (e.g. from --log-level)."""
    if isinstance(level, str):
        level = level.upper()
    _root_logger().setLevel(level)
