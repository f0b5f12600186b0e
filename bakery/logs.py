"""File logging for the storefront so log output never draws over the TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from bakery.config import DEBUG_LOG_PATH, LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | Path = DEBUG_LOG_PATH, level: int = LOG_LEVEL) -> logging.Logger:
    """Attach a file handler to the package logger and return it."""
    logger = logging.getLogger("bakery")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_file = Path(path)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
