"""Tests for logging setup."""
import logging

from core.logging_config import configure_logging


def test_configure_logging_sets_root_level() -> None:
    """The requested level is applied to the root logger, case-insensitively."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)
