"""httpx wrapper.

One builder holds the client defaults (User-Agent, redirect policy), and
`HttpxTransport` adapts `httpx.Client` to the core `HttpTransport` contract.
Tests inject an `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import ConnectionFailure, UrlErrorKind, UrlValidationError
from core.domain.models import InboundResponse, OutgoingRequest

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the CLI defaults.

    The timeout is left at the httpx default.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        follow_redirects=settings.follow_redirects,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )


class HttpxTransport:
    """`HttpTransport` backed by `httpx.Client`."""

    def __init__(self, client: httpx.Client | None = None, settings: AppSettings | None = None) -> None:
        self._client = client or build_client(settings)

    def send(self, request: OutgoingRequest) -> InboundResponse:
        url = str(request.url)
        try:
            with self._client.stream(
                request.method,
                url,
                headers=request.headers,
                content=request.body,
            ) as response:
                logger.debug("HTTP %s %s -> %s", request.method, url, response.status_code)
                return InboundResponse(
                    status_code=response.status_code,
                    body_text=_read_text(response),
                )
        except httpx.InvalidURL as exc:
            raise UrlValidationError(UrlErrorKind.OTHER, str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.warning("Connection to %s failed: %r", url, exc)
            raise ConnectionFailure(str(exc)) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _read_text(response: httpx.Response) -> str | None:
    try:
        response.read()
    except httpx.HTTPError as exc:
        logger.warning("Could not read response body: %r", exc)
        return None
    return response.text
