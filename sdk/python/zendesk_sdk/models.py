"""Data models for the Zendesk SDK."""

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BaseZendeskModel(BaseModel):
    """Base model for all Zendesk SDK models."""

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
    )


class ApiType(str, Enum):
    """Zendesk API families, each served from its own base path."""

    CORE = "core"
    HELPCENTER = "helpcenter"
    SERVICES = "services"
    VOICE = "voice"
    NPS = "nps"


ENDPOINTS: Dict[str, str] = {
    ApiType.CORE.value: ".zendesk.com/api/v2",
    ApiType.HELPCENTER.value: ".zendesk.com/api/v2/help_center",
    ApiType.SERVICES.value: ".zendesk.com/api/services/jira",
    ApiType.VOICE.value: ".zendesk.com/api/v2/channels/voice",
    ApiType.NPS.value: ".zendesk.com/api/v2/nps",
}


class TransportConfig(BaseModel):
    """Pluggable transport: a function performing the call and an adapter
    turning its raw response into a :class:`~zendesk_sdk.transport.TransportResponse`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    transport_fn: Callable[[str, Dict[str, Any]], Union[Any, Awaitable[Any]]]
    response_adapter: Callable[[Any], Any]


class ThrottleSpec(BaseZendeskModel):
    """Rate at which throttled calls are released.

    Either an explicit ``interval`` in milliseconds or a ``limit`` of calls
    per sliding ``window`` of seconds.
    """

    interval: Optional[float] = Field(default=None, gt=0)
    window: float = Field(default=1, gt=0)
    limit: float = Field(default=1, gt=0)


class ClientConfiguration(BaseModel):
    """Read-only configuration shared by every component of a client."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    subdomain: Optional[str] = None
    endpoint_uri: Optional[str] = None
    api_type: ApiType = ApiType.CORE
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    use_oauth: bool = False
    as_user: Optional[str] = None
    custom_headers: Dict[str, str] = Field(default_factory=dict)
    throttle: Union[bool, float, str, ThrottleSpec, None] = None
    query: Dict[str, Any] = Field(default_factory=dict)
    transport_config: Optional[TransportConfig] = None
    user_agent: Optional[str] = None
    timeout: float = 30.0
    debug: bool = False

    @model_validator(mode="after")
    def _check_endpoint(self) -> "ClientConfiguration":
        if not self.subdomain and not self.endpoint_uri:
            raise ValueError("either subdomain or endpoint_uri must be provided")
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Read a configuration value by name."""
        value = getattr(self, key, None)
        return default if value is None else value

    def base_endpoint(self, api_type: Optional[Union[ApiType, str]] = None) -> str:
        """Base URI for the given API family."""
        if self.endpoint_uri:
            return self.endpoint_uri.rstrip("/")
        api_type = ApiType(api_type or self.api_type)
        return f"https://{self.subdomain}{ENDPOINTS[api_type.value]}"

    def with_overrides(self, **changes: Any) -> "ClientConfiguration":
        """Copy of this configuration with some values replaced."""
        return self.model_copy(update=changes)


class SideLoadRule(BaseZendeskModel):
    """Attach records from ``response[dataset]`` to the records owning ``field``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    field: str
    name: str
    dataset: str
    all: bool = False
    array: bool = False
    data_key: Optional[str] = None


class ResourceMeta(BaseZendeskModel):
    """Static description of how a resource's responses are shaped."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    json_api_names: Tuple[str, ...] = ()
    side_load_map: Tuple[SideLoadRule, ...] = ()
    use_dot_json: bool = True
    api_type: ApiType = ApiType.CORE


class ThrottleQueueEntry(BaseZendeskModel):
    """Bookkeeping for a call waiting in the throttle queue."""

    position: int
    queued_at: float
    time_until_call: float


class ApiResponse(BaseModel):
    """The adapted HTTP response together with the resolved payload."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    response: Any
    result: Any = None
