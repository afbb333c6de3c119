"""Error types for the Carvoyant client.

Every failure raised by this package is local and happens before a request is
sent. Transport failures come straight from ``requests``.
"""

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CarvoyantError(Exception):
    """Base exception class for the Carvoyant client."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(CarvoyantError):
    """Error raised when client configuration is invalid or incomplete."""

    def __init__(self, message: str):
        super().__init__(message, ErrorSeverity.HIGH)


class ParameterValidationError(CarvoyantError, TypeError):
    """Error raised when a request argument has the wrong type or value."""
    pass


class ActionNotFoundError(ParameterValidationError):
    """Error raised when a response carries no action with the requested name."""

    def __init__(self, action_name: str):
        self.action_name = action_name
        super().__init__(f"No action found for name: {action_name}")
