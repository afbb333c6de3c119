"""
Request Builder for the Carvoyant API Client

Validates request parameters against the special-parameter rule table,
converts them to their wire representation, attaches authentication and
dispatches the call through the transport.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..core.errors import ParameterValidationError
from .authentication import AuthStrategy
from .client import HTTPClient
from .response_handler import APIResponse
from .timestamps import date_to_timestamp, is_timestamp, parse_action_timestamp


OMIT = object()


class ParameterKind(Enum):
    """How a special parameter is validated and serialized"""
    CHOICE = "choice"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FLAG = "flag"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class ParameterRule:
    """Validation and serialization rule for one named parameter"""

    name: str
    kind: ParameterKind
    choices: Tuple[str, ...] = ()

    def encode(self, value: Any) -> Any:
        """
        Validate a caller-supplied value and return its wire form

        Returns the ``OMIT`` sentinel when the value must not be sent.

        Raises:
            ParameterValidationError: If the value has the wrong type or value
        """
        if self.kind is ParameterKind.CHOICE:
            if value not in self.choices:
                raise ParameterValidationError(
                    f"{self.name} must be one of the following: {', '.join(self.choices)}"
                )
            return value

        if self.kind is ParameterKind.NUMBER:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ParameterValidationError(f"{self.name} must be a Number.")
            return value

        if self.kind in (ParameterKind.BOOLEAN, ParameterKind.FLAG):
            if not isinstance(value, bool):
                raise ParameterValidationError(f"{self.name} must be a Boolean.")
            # A false flag is left off the request entirely
            if self.kind is ParameterKind.FLAG and not value:
                return OMIT
            return 'true' if value else 'false'

        # ParameterKind.TIMESTAMP
        if is_timestamp(value):
            return value
        if not isinstance(value, datetime):
            raise ParameterValidationError(f"{self.name} must be a datetime.")
        return date_to_timestamp(value)

    def decode(self, raw: Optional[str]) -> Any:
        """
        Convert a query-string value from an action URI back to a parameter value

        Returns the ``OMIT`` sentinel when the pair carried no value.
        """
        if self.kind in (ParameterKind.BOOLEAN, ParameterKind.FLAG):
            return raw == 'true'

        if raw is None:
            return OMIT

        if self.kind is ParameterKind.NUMBER:
            try:
                return int(raw, 10)
            except ValueError:
                raise ParameterValidationError(f"{self.name} must be a Number.")

        if self.kind is ParameterKind.TIMESTAMP:
            try:
                return parse_action_timestamp(raw)
            except TypeError:
                raise ParameterValidationError(f"{self.name} must be a timestamp.")

        return raw


SORT_ORDERS = ('asc', 'desc')

PARAMETER_RULES: Dict[str, ParameterRule] = {
    rule.name: rule for rule in (
        ParameterRule('sortOrder', ParameterKind.CHOICE, SORT_ORDERS),
        ParameterRule('searchLimit', ParameterKind.NUMBER),
        ParameterRule('searchOffset', ParameterKind.NUMBER),
        ParameterRule('activeOnly', ParameterKind.BOOLEAN),
        ParameterRule('includeData', ParameterKind.BOOLEAN),
        ParameterRule('mostRecentOnly', ParameterKind.FLAG),
        ParameterRule('startTime', ParameterKind.TIMESTAMP),
        ParameterRule('endTime', ParameterKind.TIMESTAMP),
    )
}
"""Parameters with special validation/serialization, keyed by name"""

HTTP_METHODS = ('get', 'post', 'delete')

BODY_METHODS = ('post',)


def encode_parameters(parameters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Validate and serialize a parameter bag

    ``None`` values are dropped. Names without a rule pass through unchanged.

    Raises:
        ParameterValidationError: On the first invalid special parameter
    """
    encoded: Dict[str, Any] = {}

    for key, value in (parameters or {}).items():
        if value is None:
            continue

        rule = PARAMETER_RULES.get(key)
        if rule is None:
            encoded[key] = value
            continue

        wire_value = rule.encode(value)
        if wire_value is not OMIT:
            encoded[key] = wire_value

    return encoded


def decode_parameter(key: str, raw: Optional[str]) -> Any:
    """Decode one action URI query pair; returns ``OMIT`` for pairs to skip"""
    rule = PARAMETER_RULES.get(key)
    if rule is None:
        return raw if raw is not None else OMIT
    return rule.decode(raw)


class RequestBuilder:
    """
    Builds and dispatches authenticated Carvoyant API requests.

    Holds no per-request state; every call builds its own request
    configuration from the immutable auth strategy and base URL.
    """

    def __init__(self, transport: HTTPClient, auth_strategy: AuthStrategy, api_url: str):
        self.transport = transport
        self.auth_strategy = auth_strategy
        self.api_url = api_url.rstrip('/')
        self.logger = logging.getLogger(__name__)

    def build_request(
        self,
        path: str,
        method: str,
        parameters: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Build complete request configuration

        Args:
            path: API path relative to the base URL
            method: HTTP method ('get', 'post' or 'delete', any case)
            parameters: Request parameters; query string for get/delete, body for post

        Returns:
            Dictionary with method, url, headers, auth and params or json

        Raises:
            ParameterValidationError: If the path, method or any parameter is invalid
        """
        if not path or not isinstance(path, str):
            raise ParameterValidationError("path must be a non-empty String.")

        if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
            raise ParameterValidationError(
                f"method must be one of the following: {', '.join(HTTP_METHODS)}"
            )
        method = method.lower()

        encoded = encode_parameters(parameters)

        request_config: Dict[str, Any] = {
            'method': method.upper(),
            'url': self.api_url + self.auth_strategy.normalize_path(path),
            'headers': self.auth_strategy.headers(),
            'auth': self.auth_strategy.auth()
        }

        if method in BODY_METHODS:
            request_config['json'] = encoded
        else:
            request_config['params'] = encoded

        self.logger.debug(f"Built request config: {self._sanitize_for_logging(request_config)}")

        return request_config

    def build_and_send(
        self,
        path: str,
        method: str,
        parameters: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callable[[APIResponse], Any]] = None
    ) -> APIResponse:
        """
        Validate, build and send a request

        Validation happens entirely before the transport is touched.

        Args:
            path: API path relative to the base URL
            method: HTTP method ('get', 'post' or 'delete', any case)
            parameters: Request parameters
            callback: Optional function invoked once with the response

        Returns:
            The API response
        """
        if callback is not None and not callable(callback):
            raise ParameterValidationError("callback must be callable.")

        request_config = self.build_request(path, method, parameters)

        response = self.transport.send(**request_config)

        if callback is not None:
            callback(response)

        return response

    def _sanitize_for_logging(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitize request config for logging (remove sensitive data)"""
        sanitized = config.copy()

        headers = dict(sanitized.get('headers') or {})
        for key in headers:
            if key.lower() == 'authorization':
                headers[key] = '[MASKED]'
        sanitized['headers'] = headers

        if sanitized.get('auth') is not None:
            sanitized['auth'] = '[MASKED]'

        return sanitized
