"""Logging setup for the service."""

import logging

from formcheck.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root ``formcheck`` logger.

    Falls back to the ``log_level`` setting when no level is given.
    """
    level = (level or get_settings().log_level).upper()
    logger = logging.getLogger("formcheck")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
