"""Logging setup with rich console output."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Route specterm log records through a RichHandler.

    Args:
        level: Level name or number for the specterm logger

    Returns:
        The "specterm" logger
    """
    logger = logging.getLogger("specterm")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    return logger
