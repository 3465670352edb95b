"""
shared_utils/core/logger.py

Logging configuration for the package.

Only the ``shared_utils`` logger is touched; the host application's root
logger is left alone. Every module should obtain its logger via:

    from shared_utils.core.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys

from shared_utils.core.config import settings

PACKAGE_LOGGER_NAME = "shared_utils"


def _build_handler() -> logging.StreamHandler:
    """Return a stdout handler with a structured, readable format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(fmt)
    return handler


def _configure_package_logger() -> None:
    """Give the package logger a level, and a handler when nobody else logs."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers:
        return

    package_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if logging.getLogger().handlers:
        # The host (or a test framework) already logs; records propagate to it.
        return
    package_logger.addHandler(_build_handler())


_configure_package_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger under the package namespace.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rejected data URL")
    """
    return logging.getLogger(name)
