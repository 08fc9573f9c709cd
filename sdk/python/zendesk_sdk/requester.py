"""Generic request core shared by every resource."""

import functools
import logging
from typing import Any, Callable, List, Optional, Sequence

from .envelope import (
    check_request_response,
    flatten,
    next_page_link,
    process_response_body,
)
from .events import LIFECYCLE_EVENTS, EventEmitter
from .exceptions import PaginationFetchError, UploadError
from .models import ApiResponse, ClientConfiguration, ResourceMeta
from .throttle import RequestThrottle
from .transport import Transport
from .urls import PathSpec, split_path_spec

logger = logging.getLogger(__name__)

# Incremental exports hand back a next_page link even on their last page;
# only a full page means more data may follow.
INCREMENTAL_PAGE_SIZE = 1000


def is_incremental(uri: PathSpec) -> bool:
    """True when the path contains an ``incremental`` segment."""
    segments, _ = split_path_spec(uri)
    return any("incremental" in segment.split("/") for segment in segments)


def _page_count(page: Any, payload: Any) -> int:
    if isinstance(page, dict) and isinstance(page.get("count"), int):
        return page["count"]
    if isinstance(payload, list):
        return len(payload)
    return 0


class Requester:
    """Builds, sends and resolves requests on behalf of a resource."""

    def __init__(
        self,
        config: ClientConfiguration,
        meta: Optional[ResourceMeta] = None,
        throttle: Optional[RequestThrottle] = None,
    ) -> None:
        self.config = config
        self.meta = meta or ResourceMeta()
        self.side_load: List[str] = []
        self.events = EventEmitter()
        self._throttle = throttle
        self._transport: Optional[Transport] = None

    @property
    def transport(self) -> Transport:
        """Transport for this resource, created on first use."""
        if self._transport is None:
            transport = Transport(self.config, self.meta, self.side_load)
            for event_type in LIFECYCLE_EVENTS:
                transport.on(event_type, functools.partial(self.events.emit, event_type))
            self._transport = transport
        return self._transport

    @property
    def throttle(self) -> Optional[RequestThrottle]:
        if self._throttle is None and self.config.throttle:
            self._throttle = RequestThrottle(self.config.throttle)
        return self._throttle

    async def close(self) -> None:
        if self._transport is not None:
            await self._transport.close()

    def on(self, event_type: str, callback: Callable[[Any], None]) -> None:
        self.events.on(event_type, callback)

    def set_side_load(self, names: Sequence[str]) -> None:
        """Request related records with ``include=`` and attach them to results."""
        self.side_load = list(names)
        if self._transport is not None:
            self._transport.set_side_load(self.side_load)

    async def get(self, uri: PathSpec) -> ApiResponse:
        return await self.request("GET", uri)

    async def post(self, uri: PathSpec, body: Any = None) -> ApiResponse:
        return await self.request("POST", uri, body)

    async def put(self, uri: PathSpec, body: Any = None) -> ApiResponse:
        return await self.request("PUT", uri, body)

    async def patch(self, uri: PathSpec, body: Any = None) -> ApiResponse:
        return await self.request("PATCH", uri, body)

    async def delete(self, uri: PathSpec) -> ApiResponse:
        return await self.request("DELETE", uri)

    async def get_all(self, uri: PathSpec) -> List[Any]:
        return await self.request_all("GET", uri)

    async def raw_request(self, method: str, uri: PathSpec, body: Any = None) -> Any:
        """Send a request without classifying or unwrapping the response."""
        return await self.transport.request(method, uri, body)

    async def request(self, method: str, uri: PathSpec, body: Any = None) -> ApiResponse:
        """Send a request and resolve its payload.

        Raises the classified error for failed responses. A ``204 No Content``
        answer resolves to a :class:`~zendesk_sdk.exceptions.NoContentError`
        result instead of raising.
        """
        response, result = await self.raw_request(method, uri, body)
        checked = check_request_response(response, result)
        return ApiResponse(response=response, result=process_response_body(checked, self.meta))

    async def request_all(self, method: str, uri: PathSpec, body: Any = None) -> List[Any]:
        """Follow ``links.next`` / ``next_page`` links and flatten every page.

        Pages are fetched one after another. Any failing page aborts the
        walk with :class:`~zendesk_sdk.exceptions.PaginationFetchError`.
        """
        send = self.raw_request
        throttle = self.throttle
        if throttle is not None:
            send = throttle.wrap(self.raw_request)

        pages: List[Any] = []
        page_uri: Optional[PathSpec] = uri
        while page_uri:
            incremental = is_incremental(page_uri)
            logger.debug("Fetching page %d of %r", len(pages) + 1, page_uri)
            try:
                response, result = await send(method, page_uri, body)
                current_page = check_request_response(response, result)
            except Exception as e:
                raise PaginationFetchError(
                    f"Request all failed during fetching: {e}",
                    page_uri=page_uri,
                    status_code=getattr(e, "status_code", None),
                    result=getattr(e, "result", None),
                ) from e

            payload = process_response_body(current_page, self.meta)
            pages.append(payload)

            next_page = next_page_link(current_page)
            if next_page and (
                not incremental or _page_count(current_page, payload) >= INCREMENTAL_PAGE_SIZE
            ):
                page_uri = next_page
            else:
                page_uri = None

        return flatten(pages)

    async def request_upload(self, uri: PathSpec, file: Any) -> Any:
        """Upload a file and return the checked response body as sent by the API."""
        try:
            response, result = await self.transport.upload(uri, file)
            return check_request_response(response, result)
        except Exception as e:
            raise UploadError(
                f"Upload failed: {e}",
                status_code=getattr(e, "status_code", None),
                result=getattr(e, "result", None),
            ) from e
