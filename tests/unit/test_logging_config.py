"""Unit tests for CLI logging setup."""

import logging

import pytest

from semantic_pen import logging_config
from semantic_pen.logging_config import setup_logging


@pytest.fixture
def restore_package_logger():
    """Remove the handler installed by setup_logging after each test."""
    package_logger = logging.getLogger("semantic_pen")
    level = package_logger.level
    yield package_logger
    if logging_config._stderr_handler is not None:
        package_logger.removeHandler(logging_config._stderr_handler)
        logging_config._stderr_handler = None
    package_logger.setLevel(level)


class TestSetupLogging:
    """Tests for installing the stderr handler."""

    def test_installs_stream_handler(self, restore_package_logger):
        package_logger = setup_logging("info")

        assert package_logger is restore_package_logger
        assert package_logger.level == logging.INFO
        assert logging_config._stderr_handler in package_logger.handlers
        assert isinstance(logging_config._stderr_handler, logging.StreamHandler)

    def test_repeated_setup_replaces_handler(self, restore_package_logger):
        setup_logging("WARNING")
        first = logging_config._stderr_handler
        setup_logging("DEBUG")
        second = logging_config._stderr_handler

        handlers = restore_package_logger.handlers
        assert first is not second
        assert first not in handlers
        assert second in handlers
        assert sum(isinstance(h, logging.StreamHandler) for h in handlers) == 1
        assert restore_package_logger.level == logging.DEBUG
