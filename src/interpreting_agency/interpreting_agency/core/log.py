"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; the app factory and the
scripts call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys

# Package root logger, whichever import path the package was loaded under.
LOGGER_NAME = __name__.rsplit(".", 2)[0]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.handlers.clear()  # Calling twice must not duplicate output

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
