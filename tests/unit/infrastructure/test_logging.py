"""Tests for infrastructure/logging.py."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from specterm.infrastructure.logging import setup_logging


@pytest.fixture
def clean_logger() -> Iterator[logging.Logger]:
    """Restore the specterm logger after each test."""
    logger = logging.getLogger("specterm")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_returns_package_logger(self, clean_logger: logging.Logger) -> None:
        assert setup_logging() is clean_logger

    def test_sets_level(self, clean_logger: logging.Logger) -> None:
        setup_logging("DEBUG")
        assert clean_logger.level == logging.DEBUG

    def test_numeric_level(self, clean_logger: logging.Logger) -> None:
        setup_logging(logging.WARNING)
        assert clean_logger.level == logging.WARNING

    def test_single_rich_handler(self, clean_logger: logging.Logger) -> None:
        """Repeated setup does not stack handlers."""
        setup_logging()
        setup_logging("DEBUG")
        handlers = [h for h in clean_logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1

    def test_module_loggers_propagate(self, clean_logger: logging.Logger) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger("specterm.application.writer").getEffectiveLevel() == logging.DEBUG
