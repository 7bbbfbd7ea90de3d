"""Logging configuration (loguru)."""

from __future__ import annotations

import sys

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def setup_logging(*, level: str = "INFO") -> None:
    """Configure the process-wide console sink.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    logger.remove()
    logger.add(
        sys.stderr,
        format=_CONSOLE_FORMAT,
        level=level,
        colorize=True,
        diagnose=False,
    )
