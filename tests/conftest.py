"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

from gilded_rose.core.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() binds a handler to the current stderr; drop it after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_gilded_rose", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
