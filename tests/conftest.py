"""
Pytest configuration and shared fixtures for Carvoyant client testing.

The requests session is always mocked; no test touches the network.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest
import requests

from carvoyant import Client
from carvoyant.api.client import HTTPClient
from carvoyant.core.logging_manager import LoggingManager

from .fixtures.sample_data import SAMPLE_TRIPS_PAGE


def make_http_response(
    status_code: int = 200,
    body: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None
) -> Mock:
    """Build a stand-in for ``requests.Response``"""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.headers = headers or {'Content-Type': 'application/json'}

    if body is None:
        response.content = b''
        response.text = ''
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.text = json.dumps(body)
        response.content = response.text.encode('utf-8')
        response.json.return_value = body

    return response


@pytest.fixture
def mock_session():
    """Mocked requests session answering every call with an empty 200"""
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.request.return_value = make_http_response(200, {})
    return session


@pytest.fixture
def transport(mock_session):
    """HTTPClient wired to the mocked session"""
    return HTTPClient(timeout=5, session=mock_session)


@pytest.fixture
def bearer_client(transport):
    """Client in access-token mode"""
    return Client(access_token="test-access-token", transport=transport)


@pytest.fixture
def basic_client(transport):
    """Client in API key / security token mode"""
    return Client(api_key="test-api-key", security_token="test-security-token", transport=transport)


@pytest.fixture
def trips_page_response(mock_session, bearer_client):
    """A first page of trips, fetched through the bearer client"""
    mock_session.request.return_value = make_http_response(200, SAMPLE_TRIPS_PAGE)
    response = bearer_client.trips.list_trips(1234, {'searchLimit': 2})
    mock_session.request.reset_mock()
    mock_session.request.return_value = make_http_response(200, {})
    return response


def sent_request(mock_session) -> Dict[str, Any]:
    """Method, url and keyword arguments of the last request sent"""
    args, kwargs = mock_session.request.call_args
    return {'method': args[0], 'url': args[1], **kwargs}


@pytest.fixture(autouse=True)
def reset_logging_manager():
    """Remove handlers a test installed on the package logger"""
    yield
    LoggingManager().reset()


# Custom pytest markers
def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


# Test Collection Hooks
def pytest_collection_modifyitems(config, items):
    """Add markers based on file location"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
