"""Top-level client for the Zendesk API."""

import functools
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type

import httpx

from .events import LIFECYCLE_EVENTS
from .models import ClientConfiguration
from .resources import (
    Articles,
    Attachments,
    GroupMemberships,
    Groups,
    JobStatuses,
    Organizations,
    Resource,
    Search,
    TicketExport,
    Tickets,
    Users,
)
from .throttle import RequestThrottle
from .transport import default_transport_config


DEFAULT_RESOURCES: Mapping[str, Type[Resource]] = MappingProxyType(
    {
        "articles": Articles,
        "attachments": Attachments,
        "group_memberships": GroupMemberships,
        "groups": Groups,
        "job_statuses": JobStatuses,
        "organizations": Organizations,
        "search": Search,
        "ticket_export": TicketExport,
        "tickets": Tickets,
        "users": Users,
    }
)


class ZendeskClient:
    """Entry point exposing every registered resource as an attribute.

    Resources are created on first access and share the client's
    configuration, HTTP connection pool and request throttle.

    >>> client = ZendeskClient.with_token("acme", "agent@acme.com", "api-token")
    >>> organizations = await client.organizations.list()
    """

    def __init__(
        self,
        config: Optional[ClientConfiguration] = None,
        resources: Mapping[str, Type[Resource]] = DEFAULT_RESOURCES,
        logger: Optional[logging.Logger] = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = ClientConfiguration(**options)
        elif options:
            config = config.with_overrides(**options)

        self._http: Optional[httpx.AsyncClient] = None
        if config.transport_config is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(config.timeout),
                follow_redirects=True,
            )
            config = config.with_overrides(transport_config=default_transport_config(self._http))

        self._config = config
        self._registry: Mapping[str, Type[Resource]] = MappingProxyType(dict(resources))
        self._logger = logger or logging.getLogger(__name__)
        self._throttle = RequestThrottle(config.throttle) if config.throttle else None
        self._instances: Dict[str, Resource] = {}

    @classmethod
    def with_token(cls, subdomain: str, username: str, token: str, **options: Any) -> "ZendeskClient":
        """Create a client authenticating with an API token."""
        return cls(subdomain=subdomain, username=username, token=token, **options)

    @classmethod
    def with_password(
        cls, subdomain: str, username: str, password: str, **options: Any
    ) -> "ZendeskClient":
        """Create a client authenticating with a password."""
        return cls(subdomain=subdomain, username=username, password=password, **options)

    @classmethod
    def with_oauth(cls, subdomain: str, token: str, **options: Any) -> "ZendeskClient":
        """Create a client authenticating with an OAuth access token."""
        return cls(subdomain=subdomain, token=token, use_oauth=True, **options)

    async def __aenter__(self) -> "ZendeskClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP connection pool owned by this client."""
        if self._http is not None:
            await self._http.aclose()

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def resources(self) -> Mapping[str, Type[Resource]]:
        return self._registry

    @property
    def throttle(self) -> Optional[RequestThrottle]:
        return self._throttle

    def resource(self, name: str) -> Resource:
        """The resource registered under ``name``, created on first use."""
        instance = self._instances.get(name)
        if instance is not None:
            return instance

        resource_class = self._registry[name]
        instance = resource_class.from_config(self._config, self._throttle)
        for event_type in LIFECYCLE_EVENTS:
            instance.on(event_type, functools.partial(self._debug, event_type))
        self._instances[name] = instance
        return instance

    def __getattr__(self, name: str) -> Resource:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.resource(name)
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no resource {name!r}"
            ) from None

    def _debug(self, event_type: str, event_data: Any) -> None:
        if self._config.debug:
            self._logger.debug("%s %s", event_type, event_data)


def create_client(
    config: Optional[ClientConfiguration] = None,
    resources: Mapping[str, Type[Resource]] = DEFAULT_RESOURCES,
    **options: Any,
) -> ZendeskClient:
    """Create a :class:`ZendeskClient` from a configuration or keyword options."""
    return ZendeskClient(config, resources=resources, **options)
