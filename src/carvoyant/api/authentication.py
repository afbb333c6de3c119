"""
Authentication strategies for the Carvoyant API Client

Two credential schemes exist, each tied to its own API generation:

- Bearer: OAuth access token sent in an ``Authorization`` header (current API)
- Basic: API key and security token sent as HTTP Basic credentials (legacy API)

The scheme is chosen once, when the client is constructed.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

from requests.auth import AuthBase, HTTPBasicAuth

from ..core.errors import ConfigurationError


DEFAULT_API_URL = 'https://api.carvoyant.com/v1/api'
"""Base URL of the token-authenticated API"""

OLD_API_URL = 'https://dash.carvoyant.com/api'
"""Base URL of the key/secret-authenticated API"""

logger = logging.getLogger(__name__)


class AuthStrategy(ABC):
    """Abstract base class for the supported credential schemes"""

    type: str = ''
    default_api_url: str = ''

    @abstractmethod
    def headers(self) -> Dict[str, str]:
        """Headers to attach to every request"""
        pass

    @abstractmethod
    def auth(self) -> Optional[AuthBase]:
        """requests auth handler to attach to every request"""
        pass

    def normalize_path(self, path: str) -> str:
        """Adjust an API path to what this API generation expects"""
        return path

    @staticmethod
    def from_credentials(
        access_token: Optional[str] = None,
        api_key: Optional[str] = None,
        security_token: Optional[str] = None
    ) -> 'AuthStrategy':
        """
        Select the credential scheme from the supplied credentials

        Args:
            access_token: OAuth access token (bearer mode)
            api_key: (deprecated) API key (basic mode)
            security_token: (deprecated) Security token (basic mode)

        Returns:
            BearerAuth when a token is present, BasicAuth otherwise

        Raises:
            ConfigurationError: If no complete credential set is present
        """
        if access_token:
            if api_key or security_token:
                logger.warning("Both access_token and api_key/security_token supplied, using access_token")
            return BearerAuth(access_token)

        if api_key and security_token:
            return BasicAuth(api_key, security_token)

        if api_key:
            raise ConfigurationError('security_token is required when api_key is supplied.')
        if security_token:
            raise ConfigurationError('api_key is required when security_token is supplied.')

        raise ConfigurationError('access_token or both api_key and security_token are required.')


@dataclass(frozen=True)
class BearerAuth(AuthStrategy):
    """OAuth access token authentication"""

    access_token: str = field(repr=False)

    type = 'bearer'
    default_api_url = DEFAULT_API_URL

    def headers(self) -> Dict[str, str]:
        return {'Authorization': f'Bearer {self.access_token}'}

    def auth(self) -> Optional[AuthBase]:
        return None

    def normalize_path(self, path: str) -> str:
        # Paths without a trailing slash answer '596 Service Not Found'
        if not path.endswith('/'):
            return path + '/'
        return path


@dataclass(frozen=True)
class BasicAuth(AuthStrategy):
    """HTTP Basic authentication with an API key and security token"""

    api_key: str
    security_token: str = field(repr=False)

    type = 'basic'
    default_api_url = OLD_API_URL

    def headers(self) -> Dict[str, str]:
        return {}

    def auth(self) -> Optional[AuthBase]:
        return HTTPBasicAuth(self.api_key, self.security_token)
