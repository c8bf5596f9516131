"""Tests for structured logging setup."""

import logging

import pytest
import structlog

from apps.api.core.logging import ENGINE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestStructuredLogging:
    """Test structlog configuration."""

    def test_setup_logging_configures_structlog(self):
        """After setup, structlog.get_logger() should return a bound logger."""
        setup_logging(log_level="DEBUG", json_output=True)
        logger = structlog.get_logger()
        assert logger is not None

    def test_setup_logging_dev_mode(self):
        """Dev mode should configure console renderer without errors."""
        setup_logging(log_level="DEBUG", json_output=False)
        logger = structlog.get_logger()
        assert logger is not None

    def test_stdlib_records_use_structlog_formatter(self):
        setup_logging(log_level="INFO", json_output=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_engine_logger_follows_level(self):
        setup_logging(log_level="WARNING", json_output=True)
        assert logging.getLogger(ENGINE_LOGGER).level == logging.WARNING
