"""Logging setup for the catalog package."""

import logging
import sys

from catalog.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``catalog`` logger.

    Args:
        level: Log level name; defaults to ``settings.LOG_LEVEL``

    Returns:
        The configured ``catalog`` logger
    """
    logger = logging.getLogger("catalog")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # Repeated calls (scripts, tests) must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
