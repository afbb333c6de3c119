"""
Base Endpoint Class for the Carvoyant API Client

Abstract base class providing the shared plumbing of every resource group:
path construction, required-argument checks and request dispatch.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, TYPE_CHECKING

from ...core.errors import ParameterValidationError
from ..response_handler import APIResponse

if TYPE_CHECKING:
    from ...client import Client


ResponseCallback = Callable[[APIResponse], Any]


class BaseEndpoint(ABC):
    """
    Abstract base class for Carvoyant API resource groups.

    Endpoint methods only assemble a path; validation and serialization of
    parameters happen in the client's RequestBuilder.
    """

    def __init__(self, client: 'Client'):
        """
        Initialize endpoint with its owning client

        Args:
            client: Configured Client instance
        """
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)
        self.base_path = self._get_base_path()

    @abstractmethod
    def _get_base_path(self) -> str:
        """Return the base API path for this endpoint (e.g., '/vehicle')"""
        pass

    def _build_endpoint(self, *segments: Any) -> str:
        """
        Build the endpoint path from the base path and extra segments

        Segments that are None or empty are skipped.
        """
        endpoint = self.base_path.rstrip('/')

        for segment in segments:
            if segment is None or segment == '':
                continue
            endpoint += '/' + str(segment).strip('/')

        return endpoint

    def _validate_required_params(self, **params: Any):
        """
        Validate that required arguments are present

        Raises:
            ParameterValidationError: For the first argument that is None
        """
        for name, value in params.items():
            if value is None:
                raise ParameterValidationError(f"{name} must be defined.")

    def _request(
        self,
        path: str,
        method: str = 'get',
        parameters: Optional[Mapping[str, Any]] = None,
        callback: Optional[ResponseCallback] = None
    ) -> APIResponse:
        self.logger.debug(f"{method.upper()} {path}")
        return self.client.make_request(path, method, parameters, callback)

    @staticmethod
    def _body(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
        if not isinstance(data, Mapping):
            raise ParameterValidationError(f"{name} must be a Mapping.")
        return dict(data)
