"""
Logging setup for gilded_rose.

Modules log through logging.getLogger(__name__); setup_logging() attaches a
single stderr handler to the package logger.
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "gilded_rose"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger. Calling it again only changes the level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        The configured package logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    if not any(getattr(h, "_gilded_rose", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gilded_rose = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
