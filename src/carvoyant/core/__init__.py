"""Core modules for the Carvoyant client.

Configuration, logging and the exception hierarchy shared by the API layer.
"""

from .config_manager import ClientSettings, ConfigManager, LoggingSettings
from .errors import (
    ActionNotFoundError,
    CarvoyantError,
    ConfigurationError,
    ErrorSeverity,
    ParameterValidationError
)
from .logging_manager import LoggingManager

__all__ = [
    "ClientSettings",
    "ConfigManager",
    "LoggingSettings",
    "ActionNotFoundError",
    "CarvoyantError",
    "ConfigurationError",
    "ErrorSeverity",
    "ParameterValidationError",
    "LoggingManager"
]
