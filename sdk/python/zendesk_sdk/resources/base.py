"""Base class for API resources."""

from typing import Any, Callable, ClassVar, Optional, Sequence

from ..models import ClientConfiguration, ResourceMeta
from ..requester import Requester
from ..throttle import RequestThrottle


class Resource:
    """A group of related endpoints delegating to a shared :class:`Requester`."""

    meta: ClassVar[ResourceMeta] = ResourceMeta()

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    @classmethod
    def from_config(
        cls,
        config: ClientConfiguration,
        throttle: Optional[RequestThrottle] = None,
    ) -> "Resource":
        return cls(Requester(config, cls.meta, throttle))

    @property
    def requester(self) -> Requester:
        return self._requester

    def on(self, event_type: str, callback: Callable[[Any], None]) -> None:
        self._requester.on(event_type, callback)

    def set_side_load(self, names: Sequence[str]) -> None:
        """Side-load the named datasets (``include=``) on subsequent requests."""
        self._requester.set_side_load(names)

    async def close(self) -> None:
        await self._requester.close()
