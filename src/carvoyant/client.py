"""
Carvoyant API Client

Entry point of the package: owns the immutable settings, the selected
authentication strategy and the transport, and exposes the resource groups
and the pagination helpers.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from .api.actions import NEXT_ACTION, PREVIOUS_ACTION, action_parameters, action_request_path
from .api.authentication import AuthStrategy
from .api.client import HTTPClient
from .api.endpoints import AccountEndpoints, EventEndpoints, TripEndpoints, VehicleEndpoints
from .api.request_builder import RequestBuilder
from .api.response_handler import APIResponse
from .core.config_manager import ClientSettings, ConfigManager
from .core.errors import ConfigurationError, ParameterValidationError
from .core.logging_manager import LoggingManager


ResponseCallback = Callable[[APIResponse], Any]


class Client:
    """
    Carvoyant API client.

    Credentials decide which API generation is used:

    - ``access_token``: OAuth bearer token against https://api.carvoyant.com/v1/api
    - ``api_key`` + ``security_token`` (deprecated): HTTP Basic against https://dash.carvoyant.com/api

    Resource groups:

    - ``accounts``: AccountEndpoints
    - ``vehicles``: VehicleEndpoints
    - ``trips``: TripEndpoints
    - ``events``: EventEndpoints
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        transport: Optional[HTTPClient] = None,
        **options: Any
    ):
        """
        Initialize the client

        Args:
            settings: Validated settings; built from ``options`` when omitted
            transport: Optional HTTP transport (a new HTTPClient by default)
            **options: ClientSettings fields, e.g. ``access_token`` or ``api_key``
                and ``security_token``, ``api_url``, ``timeout``

        Raises:
            ConfigurationError: If the options are invalid or no complete
                credential set is supplied
        """
        if settings is not None and options:
            raise ConfigurationError("Pass either settings or keyword options, not both.")

        if settings is None:
            try:
                settings = ClientSettings(**options)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid client options: {e}")

        self.settings = settings
        self.logger = logging.getLogger(__name__)

        self.auth_strategy = AuthStrategy.from_credentials(**settings.credentials())
        self.api_url = settings.api_url or self.auth_strategy.default_api_url

        self.transport = transport or HTTPClient(
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
            user_agent=settings.user_agent
        )
        self.request_builder = RequestBuilder(self.transport, self.auth_strategy, self.api_url)

        self.accounts = AccountEndpoints(self)
        self.vehicles = VehicleEndpoints(self)
        self.trips = TripEndpoints(self)
        self.events = EventEndpoints(self)

        self.logger.info(f"Carvoyant client using {self.auth_strategy.type} authentication against {self.api_url}")

    def make_request(
        self,
        path: str,
        method: str = 'get',
        parameters: Optional[Mapping[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Validate, authenticate and send a request against the API

        Args:
            path: API path relative to the base URL (e.g. '/vehicle/1/trip')
            method: 'get', 'post' or 'delete' (any case)
            parameters: Query parameters (get/delete) or body fields (post).
                Special parameters: ``sortOrder`` ('asc'/'desc'), ``searchLimit``
                and ``searchOffset`` (numbers), ``activeOnly``, ``includeData`` and
                ``mostRecentOnly`` (booleans), ``startTime`` and ``endTime``
                (datetimes or wire timestamps). None values are not sent.
            callback: Optional function invoked once with the response

        Returns:
            The API response, whatever its status

        Raises:
            ParameterValidationError: Before anything is sent, if an argument is invalid
        """
        return self.request_builder.build_and_send(path, method, parameters, callback)

    @staticmethod
    def action_parameters(response: Any, action_name: str) -> Dict[str, Any]:
        """Return the request parameters of the response's action named ``action_name``"""
        return action_parameters(response, action_name)

    def make_action_request(
        self,
        response: APIResponse,
        action_name: str,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        """
        Follow a hypermedia action of an earlier response

        The request is replayed against the path and with the method of the
        request that produced ``response``.
        """
        parameters = action_parameters(response, action_name)

        request_path = getattr(response, 'request_path', None)
        request_method = getattr(response, 'request_method', None)
        if not request_path or not request_method:
            raise ParameterValidationError("response does not identify the request that produced it.")

        path = action_request_path(request_path, self.api_url)
        self.logger.debug(f"Following action '{action_name}' to {path}")

        return self.make_request(path, request_method.lower(), parameters, callback)

    def next_page(self, response: APIResponse, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Request the page after ``response``"""
        return self.make_action_request(response, NEXT_ACTION, callback)

    def prev_page(self, response: APIResponse, callback: Optional[ResponseCallback] = None) -> APIResponse:
        """Request the page before ``response``"""
        return self.make_action_request(response, PREVIOUS_ACTION, callback)

    def close(self):
        """Close the underlying transport"""
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def create_client(**options: Any) -> Client:
    """Factory for creating a new Client from keyword options"""
    return Client(**options)


def create_client_from_config(
    config_path: Optional[Union[str, Path]] = None,
    transport: Optional[HTTPClient] = None
) -> Client:
    """
    Create a client from a YAML file and CARVOYANT_* environment variables

    Applies the logging section of the settings when it is enabled.
    """
    settings = ConfigManager(config_path).load_config()

    if settings.logging.enabled:
        LoggingManager().configure(
            level=settings.logging.level,
            log_to_console=settings.logging.log_to_console,
            file_path=settings.logging.file_path,
            backup_count=settings.logging.backup_count
        )

    return Client(settings=settings, transport=transport)
