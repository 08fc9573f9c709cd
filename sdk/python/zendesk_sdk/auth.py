"""Authentication classes for the Zendesk SDK."""

import base64
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .exceptions import AuthConfigurationError
from .models import ClientConfiguration


class Authenticator(ABC):
    """Base class for authentication methods."""

    def get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers for requests."""
        return {"Authorization": self.authorization_header()}

    @abstractmethod
    def authorization_header(self) -> str:
        """Value of the ``Authorization`` header."""
        pass

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Get the authentication type."""
        pass


class OAuthAuth(Authenticator):
    """OAuth bearer token authentication."""

    def __init__(self, token: Optional[str]) -> None:
        self.token = token

    def authorization_header(self) -> str:
        if not self.token:
            raise AuthConfigurationError("OAuth is enabled, but token is missing.")
        return f"Bearer {self.token}"

    @property
    def auth_type(self) -> str:
        return "oauth"


class BasicAuth(Authenticator):
    """HTTP Basic authentication with a password or an API token.

    A configured password wins over a token: ``username:password`` is
    encoded in that case, ``username/token:token`` otherwise.
    """

    def __init__(
        self,
        username: Optional[str],
        password: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        self.username = username
        self.password = password
        self.token = token

    def credentials(self) -> str:
        """Unencoded credential string."""
        if not self.username or not (self.password or self.token):
            raise AuthConfigurationError("Missing credentials for Basic Authentication.")
        if self.password:
            return f"{self.username}:{self.password}"
        return f"{self.username}/token:{self.token}"

    def authorization_header(self) -> str:
        encoded = base64.b64encode(self.credentials().encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    @property
    def auth_type(self) -> str:
        return "basic-password" if self.password else "basic-token"


def authenticator_for(config: ClientConfiguration) -> Authenticator:
    """Pick the authentication method selected by the configuration."""
    if config.get("use_oauth"):
        return OAuthAuth(config.get("token"))
    return BasicAuth(config.get("username"), config.get("password"), config.get("token"))


def create_authorization_header(config: ClientConfiguration) -> str:
    """Build the ``Authorization`` header value for a configuration."""
    return authenticator_for(config).authorization_header()


def create_basic_auth_header(config: ClientConfiguration) -> str:
    """Build a Basic ``Authorization`` header regardless of the OAuth flag."""
    return BasicAuth(
        config.get("username"), config.get("password"), config.get("token")
    ).authorization_header()
