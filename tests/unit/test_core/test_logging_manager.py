"""
Unit tests for LoggingManager.
"""

import logging
import logging.handlers

import pytest

from carvoyant.core.logging_manager import PACKAGE_LOGGER, ColoredFormatter, LoggingManager


class TestLoggingManager:
    """Test suite for package logging configuration"""

    def test_singleton(self):
        assert LoggingManager() is LoggingManager()

    def test_nothing_installed_by_default(self):
        assert LoggingManager().handlers == {}

    def test_console_handler(self):
        logger = LoggingManager().configure(level="WARNING")

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING
        console = LoggingManager().handlers['console']
        assert console in logger.handlers
        assert isinstance(console.formatter, ColoredFormatter)

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "nested" / "carvoyant.log"

        logger = LoggingManager().configure(level="INFO", log_to_console=False, file_path=str(log_file))
        logging.getLogger("carvoyant.api.client").info("request sent")

        file_handler = LoggingManager().handlers['file']
        assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
        assert 'console' not in LoggingManager().handlers
        file_handler.flush()
        assert "request sent" in log_file.read_text()
        assert logger.level == logging.INFO

    def test_reconfigure_replaces_handlers(self):
        manager = LoggingManager()
        manager.configure(level="INFO")
        first = manager.handlers['console']

        manager.configure(level="DEBUG")

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert first not in package_logger.handlers
        assert manager.handlers['console'] in package_logger.handlers

    def test_set_log_level(self):
        manager = LoggingManager()
        manager.configure(level="INFO")

        manager.set_log_level("error")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
        assert manager.handlers['console'].level == logging.ERROR

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            LoggingManager().configure(level="LOUD")

    def test_reset(self):
        manager = LoggingManager()
        manager.configure(level="INFO")
        handler = manager.handlers['console']

        manager.reset()

        assert manager.handlers == {}
        assert handler not in logging.getLogger(PACKAGE_LOGGER).handlers

    def test_colored_formatter(self):
        record = logging.LogRecord("carvoyant", logging.ERROR, __file__, 1, "boom", None, None)
        formatted = ColoredFormatter('%(levelname)s %(message)s').format(record)

        assert formatted.startswith('\033[31m')
        assert formatted.endswith('\033[0m')
        assert "ERROR boom" in formatted
