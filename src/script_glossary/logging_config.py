from __future__ import annotations

import sys

from loguru import logger

_LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str = "INFO") -> int:
    """Route loguru output to stderr at ``level``; returns the new sink id."""
    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), format=_LOG_FORMAT)
