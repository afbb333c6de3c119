"""
Unit tests for authentication strategy selection.
"""

import logging

import pytest
from requests.auth import HTTPBasicAuth

from carvoyant.api.authentication import (
    DEFAULT_API_URL,
    OLD_API_URL,
    AuthStrategy,
    BasicAuth,
    BearerAuth
)
from carvoyant.core.errors import ConfigurationError


class TestAuthStrategySelection:
    """Test suite for AuthStrategy.from_credentials"""

    def test_access_token_selects_bearer(self):
        strategy = AuthStrategy.from_credentials(access_token="abc")

        assert isinstance(strategy, BearerAuth)
        assert strategy.type == 'bearer'
        assert strategy.default_api_url == DEFAULT_API_URL

    def test_key_and_token_select_basic(self):
        strategy = AuthStrategy.from_credentials(api_key="key", security_token="secret")

        assert isinstance(strategy, BasicAuth)
        assert strategy.type == 'basic'
        assert strategy.default_api_url == OLD_API_URL

    def test_access_token_wins_over_key_pair(self, caplog):
        with caplog.at_level(logging.WARNING, logger="carvoyant"):
            strategy = AuthStrategy.from_credentials(
                access_token="abc", api_key="key", security_token="secret"
            )

        assert isinstance(strategy, BearerAuth)
        assert "using access_token" in caplog.text

    def test_api_key_without_security_token(self):
        with pytest.raises(ConfigurationError, match="security_token is required when api_key is supplied."):
            AuthStrategy.from_credentials(api_key="key")

    def test_security_token_without_api_key(self):
        with pytest.raises(ConfigurationError, match="api_key is required when security_token is supplied."):
            AuthStrategy.from_credentials(security_token="secret")

    @pytest.mark.parametrize("credentials", [{}, {'access_token': ''}, {'access_token': None, 'api_key': None}])
    def test_no_credentials(self, credentials):
        with pytest.raises(ConfigurationError, match="access_token or both api_key and security_token are required."):
            AuthStrategy.from_credentials(**credentials)


class TestBearerAuth:
    """Test suite for token authentication"""

    def test_headers(self):
        auth = BearerAuth("abc")

        assert auth.headers() == {'Authorization': 'Bearer abc'}
        assert auth.auth() is None

    @pytest.mark.parametrize("path, expected", [
        ('/vehicle', '/vehicle/'),
        ('/vehicle/', '/vehicle/'),
        ('/vehicle/1/trip', '/vehicle/1/trip/'),
    ])
    def test_trailing_slash(self, path, expected):
        assert BearerAuth("abc").normalize_path(path) == expected

    def test_token_not_in_repr(self):
        assert "abc" not in repr(BearerAuth("abc"))

    def test_is_immutable(self):
        auth = BearerAuth("abc")
        with pytest.raises(AttributeError):
            auth.access_token = "other"


class TestBasicAuth:
    """Test suite for API key / security token authentication"""

    def test_auth_handler(self):
        auth = BasicAuth("key", "secret")

        assert auth.headers() == {}
        assert auth.auth() == HTTPBasicAuth("key", "secret")

    def test_path_unchanged(self):
        assert BasicAuth("key", "secret").normalize_path('/vehicle') == '/vehicle'

    def test_security_token_not_in_repr(self):
        assert "secret" not in repr(BasicAuth("key", "secret"))
