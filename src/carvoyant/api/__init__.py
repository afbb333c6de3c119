"""
Carvoyant API Package

HTTP transport, authentication strategies, request building, response
handling and action resolution for the Carvoyant REST API.
"""

from .client import HTTPClient
from .authentication import AuthStrategy, BearerAuth, BasicAuth, DEFAULT_API_URL, OLD_API_URL
from .request_builder import RequestBuilder, ParameterRule, ParameterKind, PARAMETER_RULES
from .response_handler import Action, APIResponse, ResponseHandler
from .endpoints import (
    BaseEndpoint,
    AccountEndpoints,
    VehicleEndpoints,
    TripEndpoints,
    EventEndpoints
)

__all__ = [
    'HTTPClient',
    'AuthStrategy',
    'BearerAuth',
    'BasicAuth',
    'DEFAULT_API_URL',
    'OLD_API_URL',
    'RequestBuilder',
    'ParameterRule',
    'ParameterKind',
    'PARAMETER_RULES',
    'Action',
    'APIResponse',
    'ResponseHandler',
    'BaseEndpoint',
    'AccountEndpoints',
    'VehicleEndpoints',
    'TripEndpoints',
    'EventEndpoints'
]
