"""Tests for authorization header strategies."""

import base64

import pytest

from zendesk_sdk.auth import (
    BasicAuth,
    OAuthAuth,
    authenticator_for,
    create_authorization_header,
    create_basic_auth_header,
)
from zendesk_sdk.exceptions import AuthConfigurationError


def _decode(header: str) -> str:
    scheme, _, encoded = header.partition(" ")
    assert scheme == "Basic"
    return base64.b64decode(encoded).decode("utf-8")


class TestOAuth:
    def test_bearer_token(self, make_config):
        config = make_config(use_oauth=True, token="oauth-123")
        assert create_authorization_header(config) == "Bearer oauth-123"

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_is_an_error(self, make_config, token):
        config = make_config(use_oauth=True, token=token, password="ignored")
        with pytest.raises(AuthConfigurationError):
            create_authorization_header(config)

    def test_selected_by_flag(self, make_config):
        assert isinstance(authenticator_for(make_config(use_oauth=True)), OAuthAuth)
        assert authenticator_for(make_config(use_oauth=True)).auth_type == "oauth"


class TestBasicAuth:
    def test_token_credentials(self, make_config):
        header = create_authorization_header(make_config(token="abc"))
        assert _decode(header) == "agent@acme.com/token:abc"

    def test_password_credentials(self, make_config):
        header = create_authorization_header(make_config(token=None, password="hunter2"))
        assert _decode(header) == "agent@acme.com:hunter2"

    def test_password_takes_precedence_over_token(self, make_config):
        config = make_config(token="abc", password="hunter2")
        assert _decode(create_basic_auth_header(config)) == "agent@acme.com:hunter2"
        assert authenticator_for(config).auth_type == "basic-password"

    def test_missing_username(self, make_config):
        with pytest.raises(AuthConfigurationError):
            create_authorization_header(make_config(username=None))

    def test_missing_password_and_token(self, make_config):
        with pytest.raises(AuthConfigurationError):
            create_authorization_header(make_config(token=None))

    def test_auth_headers(self):
        headers = BasicAuth("agent@acme.com", token="abc").get_auth_headers()
        assert list(headers) == ["Authorization"]
        assert _decode(headers["Authorization"]) == "agent@acme.com/token:abc"
