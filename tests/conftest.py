"""Shared fixtures: fake transport and offline httpx handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import httpx
import pytest

from core.domain.errors import CurlLiteError
from core.domain.models import InboundResponse, OutgoingRequest


@dataclass
class FakeTransport:
    """Records every request and answers with a canned response or error."""

    response: InboundResponse = field(
        default_factory=lambda: InboundResponse(status_code=200, body_text="ok")
    )
    error: CurlLiteError | None = None
    sent: list[OutgoingRequest] = field(default_factory=list)

    def send(self, request: OutgoingRequest) -> InboundResponse:
        self.sent.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@dataclass
class RecordingHandler:
    """`httpx.MockTransport` handler that keeps the requests it saw."""

    respond: Callable[[httpx.Request], httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    def _make(respond: Callable[[httpx.Request], httpx.Response]) -> RecordingHandler:
        return RecordingHandler(respond=respond)

    return _make
