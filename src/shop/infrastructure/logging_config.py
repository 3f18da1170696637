"""Logging configuration for the shop package."""

from __future__ import annotations

import logging
import sys

LOG_LEVEL_ENV = "SHOP_LOG_LEVEL"

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "WARNING") -> None:
    """Send ``shop.*`` log records to stderr at *level*.

    Safe to call more than once: previous handlers are closed and replaced.
    """
    level = level.upper()
    if level not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    logger = logging.getLogger("shop")
    logger.setLevel(level)
    for old_handler in logger.handlers[:]:
        old_handler.close()
        logger.removeHandler(old_handler)
    logger.addHandler(handler)
    # Avoid duplicate lines through the root logger
    logger.propagate = False
