"""Centralized Logging Management for the Carvoyant client

Handles log configuration, formatting, and output management for the
``carvoyant`` logger hierarchy. Nothing is configured until ``configure`` is
called; a library must not install handlers on import.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional


PACKAGE_LOGGER = "carvoyant"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Logging configuration for the ``carvoyant`` package logger."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.handlers: Dict[str, logging.Handler] = {}
        self._initialized = True

    def configure(
        self,
        level: str = "INFO",
        log_to_console: bool = True,
        file_path: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5
    ) -> logging.Logger:
        """Attach console and file handlers to the package logger.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_console: Whether to log to stderr
            file_path: Optional path of a rotating log file
            max_bytes: Rotation size of the log file
            backup_count: Number of rotated files to keep

        Returns:
            The configured package logger
        """
        numeric_level = self._parse_level(level)
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(numeric_level)

        # Reconfiguring replaces handlers installed by an earlier call
        self._remove_handlers(package_logger)

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            package_logger.addHandler(console_handler)
            self.handlers['console'] = console_handler

        if file_path:
            log_file = Path(file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            package_logger.addHandler(file_handler)
            self.handlers['file'] = file_handler

        return package_logger

    def _remove_handlers(self, package_logger: logging.Logger):
        for handler in self.handlers.values():
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    @staticmethod
    def _parse_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level

    def set_log_level(self, level: str):
        """Set the logging level for the package logger and its console handler.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = self._parse_level(level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

        console_handler = self.handlers.get('console')
        if console_handler:
            console_handler.setLevel(numeric_level)

    def reset(self):
        """Remove every handler this manager installed and restore the default level."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        self._remove_handlers(package_logger)
        package_logger.setLevel(logging.NOTSET)
