"""Logging setup. Modules just use `logging.getLogger(__name__)`; this attaches the handler once."""

import logging
from typing import Optional

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger (`src`). Calling it again replaces the handler instead of stacking them."""
    logger = logging.getLogger("src")
    logger.setLevel(level or get_settings().log_level)

    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
