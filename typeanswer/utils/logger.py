"""Logging setup shared by all modules."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with a single stream handler attached.

    Args:
        name: Logger name, usually ``__name__``
        level: Level name; defaults to ``TYPEANSWER_LOG_LEVEL`` or WARNING

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel((level or os.environ.get("TYPEANSWER_LOG_LEVEL", "WARNING")).upper())
    return logger
