"""
Carvoyant API client.

Client library for the Carvoyant vehicle telematics REST API
(http://confluence.carvoyant.com/display/PUBDEV/Carvoyant+API): accounts,
vehicles, trips, data points, constraints and event subscriptions.
"""

from . import utils as Utilities
from .client import Client, create_client, create_client_from_config
from .core.errors import (
    ActionNotFoundError,
    CarvoyantError,
    ConfigurationError,
    ParameterValidationError
)

__version__ = '0.1.0'
VERSION = __version__

__all__ = [
    'Client',
    'create_client',
    'create_client_from_config',
    'Utilities',
    'CarvoyantError',
    'ConfigurationError',
    'ParameterValidationError',
    'ActionNotFoundError',
    'VERSION'
]
