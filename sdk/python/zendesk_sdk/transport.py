"""HTTP transport for the Zendesk SDK."""

import asyncio
import inspect
import json
import logging
import os
import platform
from typing import Any, AsyncIterator, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx
from pydantic import BaseModel

from .auth import Authenticator, authenticator_for
from .endpoints import DEFAULT_ENDPOINT_CHECKER, EndpointChecker
from .events import DEBUG_REQUEST, DEBUG_RESPONSE, DEBUG_RESULT, EventEmitter
from .exceptions import (
    NetworkError,
    RequestBodyEncodingError,
    RequestTimeoutError,
    ResponseDecodeError,
)
from .models import ClientConfiguration, ResourceMeta, TransportConfig
from .urls import PathSpec, assemble_url

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
BINARY_CONTENT_TYPE = "application/binary"
UPLOAD_CHUNK_SIZE = 64 * 1024


def generate_user_agent() -> str:
    return f"zendesk-python-sdk/1.0.0 (python/{platform.python_version()})"


class TransportResponse:
    """Transport-independent view of an HTTP response."""

    def __init__(
        self,
        status: int,
        status_text: str = "",
        headers: Any = None,
        json: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.status = status
        self.status_text = status_text
        if headers is None or isinstance(headers, (Mapping, list)):
            headers = httpx.Headers(headers or {})
        self.headers = headers
        self._json = json

    async def json(self) -> Any:
        """Decoded JSON body; awaits the adapter's decoder when it is async."""
        if self._json is None:
            return {}
        value = self._json()
        if inspect.isawaitable(value):
            value = await value
        return value

    def __repr__(self) -> str:
        return f"TransportResponse(status={self.status}, status_text={self.status_text!r})"


def adapt_httpx_response(response: httpx.Response) -> TransportResponse:
    """Response adapter for :class:`httpx.Response` objects."""
    return TransportResponse(
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=response.headers,
        json=response.json,
    )


async def _iter_stream(stream: Any) -> AsyncIterator[bytes]:
    """Chunks of a file object, each read in a worker thread."""
    while True:
        chunk = await asyncio.to_thread(stream.read, UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        yield chunk


def _request_content(body: Any) -> Any:
    if body is None or isinstance(body, (str, bytes)):
        return body
    if isinstance(body, bytearray):
        return bytes(body)
    if hasattr(body, "read"):
        return _iter_stream(body)
    return body


def default_transport_config(client: httpx.AsyncClient) -> TransportConfig:
    """Transport sending requests through an :class:`httpx.AsyncClient`."""

    async def transport_fn(uri: str, options: Dict[str, Any]) -> httpx.Response:
        try:
            return await client.request(
                options["method"],
                uri,
                headers=options["headers"],
                content=_request_content(options.get("body")),
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Request timed out: {e}", url=uri) from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}", url=uri) from e

    return TransportConfig(transport_fn=transport_fn, response_adapter=adapt_httpx_response)


def obfuscate_options(options: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of request options with the credential in ``Authorization`` masked."""
    headers = dict(options.get("headers") or {})
    authorization = headers.get("Authorization")
    if authorization:
        scheme, _, credential = authorization.partition(" ")
        headers["Authorization"] = f"{scheme} {credential[:5]}**********"
    return {**options, "headers": headers}


class Transport:
    """Assembles, sends and decodes requests for one resource."""

    def __init__(
        self,
        config: ClientConfiguration,
        meta: Optional[ResourceMeta] = None,
        side_load: Sequence[str] = (),
        endpoint_checker: EndpointChecker = DEFAULT_ENDPOINT_CHECKER,
    ) -> None:
        self.config = config
        self.meta = meta or ResourceMeta()
        self.side_load: List[str] = list(side_load)
        self.endpoint_checker = endpoint_checker
        self.auth: Authenticator = authenticator_for(config)
        self.user_agent = config.get("user_agent") or generate_user_agent()
        self.events = EventEmitter()

        self._client: Optional[httpx.AsyncClient] = None
        transport_config = config.transport_config
        if transport_config is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(config.timeout),
                follow_redirects=True,
            )
            transport_config = default_transport_config(self._client)
        self.transport_fn = transport_config.transport_fn
        self.response_adapter = transport_config.response_adapter

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client this transport created, if any."""
        if self._client is not None:
            await self._client.aclose()

    def on(self, event_type: str, callback: Callable[[Any], None]) -> None:
        self.events.on(event_type, callback)

    def set_side_load(self, side_load: Sequence[str]) -> None:
        self.side_load = list(side_load)

    @property
    def base_endpoint(self) -> str:
        return self.config.base_endpoint(self.meta.api_type)

    def assemble_url(self, method: str, uri: PathSpec) -> str:
        return assemble_url(
            self.base_endpoint,
            method,
            uri,
            side_load=self.side_load,
            default_query=self.config.query,
            use_dot_json=self.meta.use_dot_json,
            endpoint_checker=self.endpoint_checker,
        )

    def get_headers_for_request(self) -> Dict[str, str]:
        """Headers sent with every request."""
        headers = {
            "Authorization": self.auth.authorization_header(),
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": self.user_agent,
        }
        headers.update(self.config.custom_headers)

        if self.config.as_user:
            headers["X-On-Behalf-Of"] = str(self.config.as_user)

        return headers

    def get_body_for_request(self, method: str, body: Any) -> Optional[str]:
        """JSON text for the request body; GET requests never carry one."""
        if method.upper() == "GET":
            return None
        if not body:
            return "{}"
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        try:
            return json.dumps(body)
        except (TypeError, ValueError) as e:
            raise RequestBodyEncodingError(f"Failed to encode the request body: {e}") from e

    def prepare_options_for_request(
        self, method: str, uri: PathSpec, body: Any = None
    ) -> Dict[str, Any]:
        method = method.upper()
        return {
            "uri": self.assemble_url(method, uri),
            "method": method,
            "headers": self.get_headers_for_request(),
            "body": self.get_body_for_request(method, body),
        }

    async def request(
        self, method: str, uri: PathSpec, body: Any = None
    ) -> Tuple[TransportResponse, Any]:
        """Send a request and return the adapted response with its decoded body."""
        options = self.prepare_options_for_request(method, uri, body)
        return await self.send_request(options)

    async def upload(
        self, uri: PathSpec, file: Union[str, "os.PathLike[str]", bytes, Any]
    ) -> Tuple[TransportResponse, Any]:
        """POST raw file content.

        ``file`` is either a path, raw bytes or an object with ``read()``;
        paths are opened and streamed.
        """
        headers = self.get_headers_for_request()
        headers["Content-Type"] = BINARY_CONTENT_TYPE
        options: Dict[str, Any] = {
            "uri": self.assemble_url("POST", uri),
            "method": "POST",
            "headers": headers,
        }

        if isinstance(file, (bytes, bytearray)) or hasattr(file, "read"):
            return await self.send_request({**options, "body": file})

        with open(file, "rb") as stream:
            return await self.send_request({**options, "body": stream})

    async def send_request(self, options: Dict[str, Any]) -> Tuple[TransportResponse, Any]:
        self.events.emit(DEBUG_REQUEST, obfuscate_options(options))
        logger.debug("%s %s", options["method"], options["uri"])

        raw_response = self.transport_fn(options["uri"], options)
        if inspect.isawaitable(raw_response):
            raw_response = await raw_response
        response = self.response_adapter(raw_response)

        self.events.emit(DEBUG_RESPONSE, response)

        result: Any = {}
        content_type = response.headers.get("content-type") or ""
        if response.status != 204 and JSON_CONTENT_TYPE in content_type:
            try:
                result = await response.json()
            except ValueError as e:
                raise ResponseDecodeError(
                    f"Failed to decode JSON response from {options['uri']}: {e}",
                    status_code=response.status,
                ) from e

        self.events.emit(DEBUG_RESULT, result)
        return response, result
