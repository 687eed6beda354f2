"""HTTP transport contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import InboundResponse, OutgoingRequest


@runtime_checkable
class HttpTransport(Protocol):
    """Minimal contract for sending one request.

    Rules:
    - `send` is synchronous: one request in flight per run.
    - Any network failure is raised as `ConnectionFailure`.
    - A non-2xx response is not a transport error.
    """

    def send(self, request: OutgoingRequest) -> InboundResponse:
        """Send `request` and return the normalized response."""

        ...
