"""
custom_validation/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from custom_validation.core.logger import get_logger
    logger = get_logger(__name__)

Host applications that configure logging themselves keep their setup:
the package only installs its handler when the root logger has none.
"""

import logging
import sys

from custom_validation.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def _build_handler() -> logging.StreamHandler:
    """Return a stdout handler using the package log format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _configure_root_logger() -> None:
    """Configure the root logger once at import time."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level())
    root.addHandler(_build_handler())

    # Request parsing chatter is not useful next to validation logs.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rule evaluated")
    """
    return logging.getLogger(name)
