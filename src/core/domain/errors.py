"""Domain errors.

Each error carries the user-facing ``message`` that the CLI prints after the
``Error:`` prefix, so the pipeline can render any failure without knowing
which stage raised it.
"""

from __future__ import annotations

from enum import Enum


class UrlErrorKind(str, Enum):
    """Categories a rejected URL is sorted into."""

    MISSING_BASE_PROTOCOL = "missing_base_protocol"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    INVALID_PORT = "invalid_port"
    INVALID_IPV4 = "invalid_ipv4"
    INVALID_IPV6 = "invalid_ipv6"
    OTHER = "other"


_BASE_PROTOCOL_MESSAGE = "The URL does not have a valid base protocol."

_URL_MESSAGES: dict[UrlErrorKind, str] = {
    UrlErrorKind.MISSING_BASE_PROTOCOL: _BASE_PROTOCOL_MESSAGE,
    UrlErrorKind.UNSUPPORTED_SCHEME: _BASE_PROTOCOL_MESSAGE,
    UrlErrorKind.INVALID_PORT: "The URL contains an invalid port number.",
    UrlErrorKind.INVALID_IPV4: "The URL contains an invalid IPv4 address.",
    UrlErrorKind.INVALID_IPV6: "The URL contains an invalid IPv6 address.",
}

CONNECTION_FAILURE_MESSAGE = (
    "Unable to connect to the server. "
    "Perhaps the network is offline or the server hostname cannot be resolved."
)


class CurlLiteError(Exception):
    """Base for every failure reported to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UrlValidationError(CurlLiteError):
    """The target URL failed parsing or the scheme allowlist."""

    def __init__(self, kind: UrlErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(_URL_MESSAGES.get(kind, detail))


class MissingBodyError(CurlLiteError):
    def __init__(self) -> None:
        super().__init__("POST method requires -d or --json data.")


class InvalidJsonBodyError(CurlLiteError):
    """The ``--json`` value is not a JSON document."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid JSON: {detail}")


class ConnectionFailure(CurlLiteError):
    """The exchange with the server could not be completed.

    DNS errors, refused connections and timeouts all collapse into this one
    error; ``detail`` keeps the transport's own description for logging.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(CONNECTION_FAILURE_MESSAGE)
