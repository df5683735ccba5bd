"""Tests for logging_config.py utility functions."""

import os
import sys
import logging
from unittest.mock import patch
from images_resizer.core.logging_config import (
    enable_debug_logging,
    setup_logger,
    get_logger,
    logger,
)


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_setup_logger_default_parameters(self):
        """Test setup_logger with default parameters."""
        test_logger = setup_logger()
        assert test_logger.name == "images-resizer"
        assert len(test_logger.handlers) == 1
        assert not test_logger.propagate

    def test_setup_logger_custom_name(self):
        """Test setup_logger with custom name."""
        custom_name = "test-custom-logger"
        test_logger = setup_logger(name=custom_name)
        assert test_logger.name == custom_name

    def test_setup_logger_custom_level_by_parameter(self):
        """Test setup_logger with custom level via parameter."""
        test_logger = setup_logger(name="test-param-level", level="DEBUG")
        assert test_logger.level == logging.DEBUG

    def test_setup_logger_custom_level_by_env_var(self):
        """Test setup_logger with custom level via environment variable."""
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}):
            test_logger = setup_logger(name="test-env-level")
            assert test_logger.level == logging.WARNING

    def test_setup_logger_invalid_level_defaults_to_info(self):
        """Test setup_logger with invalid level defaults to INFO."""
        test_logger = setup_logger(name="test-invalid-level", level="INVALID_LEVEL")
        assert test_logger.level == logging.INFO

    def test_setup_logger_keeps_level_on_later_calls(self):
        """Test that fetching a configured logger again does not reset its level."""
        setup_logger(name="test-sticky-level", level="DEBUG")
        again = setup_logger(name="test-sticky-level")
        assert again.level == logging.DEBUG

    def test_setup_logger_structured_format(self):
        """Test setup_logger with structured format."""
        test_logger = setup_logger(name="test-structured", format_type="structured")
        format_string = test_logger.handlers[0].formatter._fmt
        assert "%(asctime)s" in format_string
        assert "%(name)s" in format_string
        assert "%(levelname)" in format_string
        assert "%(threadName)s" in format_string
        assert "%(funcName)s" in format_string

    def test_setup_logger_simple_format(self):
        """Test setup_logger with simple format."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LOG_FORMAT", None)
            test_logger = setup_logger(name="test-simple", format_type="simple")
        format_string = test_logger.handlers[0].formatter._fmt
        assert format_string == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def test_setup_logger_format_by_env_var(self):
        """Test LOG_FORMAT overrides the format type."""
        with patch.dict(os.environ, {"LOG_FORMAT": "simple"}):
            test_logger = setup_logger(name="test-env-format", format_type="structured")
        format_string = test_logger.handlers[0].formatter._fmt
        assert "%(threadName)s" not in format_string

    def test_setup_logger_writes_to_stderr(self):
        """Test the handler writes to the diagnostic stream."""
        test_logger = setup_logger(name="test-stderr")
        assert test_logger.handlers[0].stream is sys.stderr

    def test_setup_logger_no_duplicate_handlers(self):
        """Test that calling setup_logger twice does not add handlers."""
        first = setup_logger(name="test-duplicates")
        second = setup_logger(name="test-duplicates")
        assert first is second
        assert len(second.handlers) == 1


class TestGetLogger:
    """Tests for get_logger and helpers."""

    def test_get_logger_returns_configured_logger(self):
        """Test get_logger returns a logger with a handler."""
        test_logger = get_logger("test-get-logger")
        assert test_logger.name == "test-get-logger"
        assert len(test_logger.handlers) == 1

    def test_default_logger_instance(self):
        """Test the module level default logger."""
        assert logger.name == "images-resizer"

    def test_enable_debug_logging(self):
        """Test enable_debug_logging switches the named loggers to DEBUG."""
        root_level = logging.getLogger().level
        try:
            enable_debug_logging("test-debug-a", "test-debug-b")
            assert get_logger("test-debug-a").level == logging.DEBUG
            assert get_logger("test-debug-b").level == logging.DEBUG
            assert logging.getLogger().level == logging.DEBUG
        finally:
            logging.getLogger().setLevel(root_level)
