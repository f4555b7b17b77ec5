"""Logging configuration using loguru.

Everything goes to stderr: stdout is reserved for ``find`` results, which
callers pipe into ``hyprctl dispatch``.
"""

from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a levelled stderr sink.  Call once per invocation."""
    level = level.upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )

    logger.debug("Logging initialised (level={})", level)
