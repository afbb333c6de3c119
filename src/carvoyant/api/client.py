"""
HTTP transport for the Carvoyant API Client

Thin wrapper around a ``requests.Session``: applies session defaults, issues
the request and hands the raw response to the ResponseHandler.
"""

import time
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode, urlsplit

import requests
from requests.auth import AuthBase
from requests.exceptions import RequestException

from .response_handler import APIResponse, ResponseHandler


class HTTPClient:
    """
    HTTP transport for Carvoyant API requests.

    Features:
    - Session management and connection reuse
    - Default headers, SSL verification and timeouts
    - Request logging
    """

    def __init__(
        self,
        timeout: int = 30,
        verify_ssl: bool = True,
        user_agent: str = "carvoyant-python/0.1.0",
        session: Optional[requests.Session] = None
    ):
        """
        Initialize HTTP transport with configuration

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            user_agent: User agent string for requests
            session: Optional pre-built session
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent

        self.session = session or requests.Session()
        self.response_handler = ResponseHandler()

        self.logger = logging.getLogger(__name__)

        self._configure_session()

    def _configure_session(self):
        """Configure the requests session with default headers"""
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })
        self.session.verify = self.verify_ssl

    @staticmethod
    def request_path(url: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Path and query string a request for ``url`` is sent to"""
        path = urlsplit(url).path or '/'
        if params:
            path += '?' + urlencode(params)
        return path

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[AuthBase] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> APIResponse:
        """
        Send a single HTTP request

        Args:
            method: HTTP method (GET, POST, DELETE)
            url: Absolute request URL
            headers: Additional headers
            auth: requests auth handler
            params: URL query parameters
            json: JSON request body

        Returns:
            APIResponse for any HTTP status

        Raises:
            requests.RequestException: On network-level failures
        """
        method = method.upper()
        start_time = time.time()

        request_kwargs: Dict[str, Any] = {'timeout': self.timeout}
        if headers:
            request_kwargs['headers'] = headers
        if auth is not None:
            request_kwargs['auth'] = auth
        if params:
            request_kwargs['params'] = params
        if json is not None:
            request_kwargs['json'] = json

        self.logger.info(f"Making {method} request to {url}")

        try:
            response = self.session.request(method, url, **request_kwargs)
        except RequestException as e:
            self.logger.error(f"Request failed: {e}")
            raise

        self.logger.info(
            f"{method} {url} completed with HTTP {response.status_code} in {time.time() - start_time:.2f}s"
        )

        return self.response_handler.handle_response(
            response,
            request_method=method,
            request_path=self.request_path(url, params)
        )

    def close(self):
        """Close the HTTP session and cleanup resources"""
        if self.session:
            self.session.close()
            self.logger.info("HTTP client session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
