"""Tests for logging configuration"""
import tempfile
import os
import logging
from pathlib import Path
from unittest.mock import patch

from config import Config
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_counter_processing,
    log_startup,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self):
        """Test structured logging setup"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "logs" / "test.log"

            config = Config(log_file=log_file, log_level="DEBUG")
            setup_structured_logging(config)

            assert log_file.parent.exists()

            logger = logging.getLogger("test")
            assert logger.isEnabledFor(logging.DEBUG)

            get_logger("test").info("Written to file")
            for handler in logging.getLogger().handlers:
                handler.flush()
            assert "Written to file" in log_file.read_text()

            for handler in list(logging.getLogger().handlers):
                handler.close()
                logging.getLogger().removeHandler(handler)

    def test_setup_without_log_file(self):
        """Test console-only logging when no log file is configured"""
        config = Config(log_file=None, log_level="WARNING")
        setup_structured_logging(config)

        root = logging.getLogger()
        assert all(not isinstance(h, logging.FileHandler) for h in root.handlers)
        assert not logging.getLogger("test").isEnabledFor(logging.INFO)

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')
        assert hasattr(logger, 'warning')

    def test_log_counter_processing(self):
        """Test structured counter processing logging"""
        logger = get_logger("test")

        # This should not raise an exception
        log_counter_processing(logger, received=10, decoded=8, skipped=1, failed=1)
        log_counter_processing(logger, received=0, decoded=0)

    def test_log_startup(self):
        """Test structured startup logging"""
        logger = get_logger("test")

        log_startup(logger, Config())
        log_startup(logger, Config(events_file=Path("/tmp/events.jsonl")))

    def test_log_error(self):
        """Test structured error logging"""
        logger = get_logger("test")
        error = ValueError("Test error")
        context = {"component": "test", "event_name": "EventCounters"}

        log_error(logger, error, context)
        log_error(logger, error)  # Without context

    def test_development_vs_production_logging(self):
        """Test different logging configurations for development vs production"""
        config = Config()

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(config)
            get_logger("test").info("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(config)
            get_logger("test").info("Test production log")

    def test_logger_context_binding(self):
        """Test logger context binding"""
        logger = get_logger("test")

        bound_logger = logger.bind(provider="System.Runtime", counter="cpu-usage")
        bound_logger.info("Test message with context")

        more_bound = bound_logger.bind(interval=1)
        more_bound.info("Test message with more context")
