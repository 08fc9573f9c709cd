"""
Zendesk Python SDK

Async Python client for the Zendesk REST APIs.

Basic usage:
    >>> from zendesk_sdk import ZendeskClient
    >>> client = ZendeskClient.with_token("acme", "agent@acme.com", "api-token")
    >>> tickets = await client.tickets.list()
    >>> print(f"Found {len(tickets)} tickets")

Authentication:
    # API token
    client = ZendeskClient.with_token(subdomain, username, token)

    # Password
    client = ZendeskClient.with_password(subdomain, username, password)

    # OAuth access token
    client = ZendeskClient.with_oauth(subdomain, access_token)

Side-loading:
    client.tickets.set_side_load(["users", "organizations"])
    tickets = await client.tickets.list()
    print(tickets[0]["requester"]["name"])
"""

from .auth import BasicAuth, OAuthAuth, create_authorization_header
from .client import DEFAULT_RESOURCES, ZendeskClient, create_client
from .exceptions import (
    ApiError,
    AuthConfigurationError,
    BadRequestError,
    ConfigurationError,
    EmptyResultError,
    ForbiddenError,
    NetworkError,
    NoContentError,
    NotFoundError,
    PaginationFetchError,
    RateLimitError,
    RequestBodyEncodingError,
    RequestTimeoutError,
    ResponseDecodeError,
    ServerError,
    UnauthorizedError,
    UploadError,
    ZendeskError,
)
from .job_monitor import JobMonitor
from .models import (
    ApiResponse,
    ApiType,
    ClientConfiguration,
    ResourceMeta,
    SideLoadRule,
    ThrottleQueueEntry,
    ThrottleSpec,
    TransportConfig,
)
from .requester import Requester
from .throttle import RequestThrottle
from .transport import Transport, TransportResponse

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main client
    "ZendeskClient",
    "create_client",
    "DEFAULT_RESOURCES",
    "Requester",
    "Transport",
    "TransportResponse",
    "RequestThrottle",
    "JobMonitor",
    # Exceptions
    "ZendeskError",
    "ApiError",
    "AuthConfigurationError",
    "BadRequestError",
    "ConfigurationError",
    "EmptyResultError",
    "ForbiddenError",
    "NetworkError",
    "NoContentError",
    "NotFoundError",
    "PaginationFetchError",
    "RateLimitError",
    "RequestBodyEncodingError",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "ServerError",
    "UnauthorizedError",
    "UploadError",
    # Models
    "ApiResponse",
    "ApiType",
    "ClientConfiguration",
    "ResourceMeta",
    "SideLoadRule",
    "ThrottleQueueEntry",
    "ThrottleSpec",
    "TransportConfig",
    # Auth
    "BasicAuth",
    "OAuthAuth",
    "create_authorization_header",
]


# Convenience functions for error checking
def is_zendesk_error(error: Exception) -> bool:
    """Check if an exception is a Zendesk SDK error."""
    return isinstance(error, ZendeskError)


def is_not_found_error(error: Exception) -> bool:
    """Check if an exception is a 404 Not Found error."""
    return isinstance(error, NotFoundError)


def is_unauthorized_error(error: Exception) -> bool:
    """Check if an exception is a 401 Unauthorized error."""
    return isinstance(error, UnauthorizedError)


def is_rate_limit_error(error: Exception) -> bool:
    """Check if an exception is a rate limit error."""
    return isinstance(error, RateLimitError)


def is_no_content(result: object) -> bool:
    """Check if a request resolved to the ``204 No Content`` marker."""
    return isinstance(result, NoContentError)
