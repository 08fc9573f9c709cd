"""Shared fixtures for the Zendesk SDK tests."""

from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple

import pytest

from zendesk_sdk.models import ClientConfiguration, TransportConfig
from zendesk_sdk.transport import TransportResponse

BASE = "https://acme.zendesk.com/api/v2"


class FakeResponse:
    """Raw response handed back by :class:`RecordingTransport`."""

    def __init__(
        self,
        body: Any = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
        status_text: Optional[str] = None,
    ) -> None:
        self.body = body
        self.status = status
        self.headers = dict(headers or {})
        if body is not None:
            self.headers.setdefault("content-type", "application/json; charset=utf-8")
        self.status_text = HTTPStatus(status).phrase if status_text is None else status_text


def fake_adapter(raw: FakeResponse) -> TransportResponse:
    def decode() -> Any:
        if isinstance(raw.body, Exception):
            raise raw.body
        return raw.body

    return TransportResponse(
        status=raw.status,
        status_text=raw.status_text,
        headers=raw.headers,
        json=decode,
    )


class RecordingTransport:
    """Transport function replaying canned responses and recording calls."""

    def __init__(self, *responses: FakeResponse) -> None:
        self.responses: List[FakeResponse] = list(responses)
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def __call__(self, uri: str, options: Dict[str, Any]) -> FakeResponse:
        self.calls.append((uri, options))
        if not self.responses:
            raise AssertionError(f"unexpected request to {uri}")
        return self.responses.pop(0)

    @property
    def uris(self) -> List[str]:
        return [uri for uri, _ in self.calls]

    def transport_config(self) -> TransportConfig:
        return TransportConfig(transport_fn=self, response_adapter=fake_adapter)


@pytest.fixture
def make_config():
    """Build a configuration wired to a :class:`RecordingTransport`."""

    def _make(transport: Optional[RecordingTransport] = None, **overrides: Any) -> ClientConfiguration:
        options: Dict[str, Any] = {
            "subdomain": "acme",
            "username": "agent@acme.com",
            "token": "secret-token",
        }
        options.update(overrides)
        if transport is not None:
            options["transport_config"] = transport.transport_config()
        return ClientConfiguration(**options)

    return _make
