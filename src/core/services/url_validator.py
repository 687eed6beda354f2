"""URL validation.

The target URL is taken apart step by step so that each failure maps to a
known category without inspecting error strings:

1. split into components (a bad bracketed host fails here),
2. require a scheme,
3. check the port, then the host literal (IPv6 in brackets, dotted IPv4),
4. require a non-empty host for special schemes,
5. finally apply the http/https allowlist.

No network access happens here.
"""

from __future__ import annotations

import ipaddress
import logging
import re
from urllib.parse import SplitResult, urlsplit

from core.domain.errors import UrlErrorKind, UrlValidationError
from core.domain.models import ValidatedUrl

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Schemes that always carry a host.
_SPECIAL_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp", "ws", "wss"})

_NUMERIC_LABEL = re.compile(r"^[0-9]+$")


def validate_url(raw: str) -> ValidatedUrl:
    """Parse `raw` and return a `ValidatedUrl`.

    Raises:
        UrlValidationError: with the category of the first failed check.
    """

    raw = raw.strip()
    parts = _split(raw)

    if not parts.scheme:
        raise _reject(raw, UrlErrorKind.MISSING_BASE_PROTOCOL)

    port = _check_port(raw, parts)
    host = _check_host(raw, parts)

    if parts.scheme not in ALLOWED_SCHEMES:
        raise _reject(raw, UrlErrorKind.UNSUPPORTED_SCHEME, parts.scheme)

    return ValidatedUrl(raw=raw, scheme=parts.scheme, host=host, port=port)


def _split(raw: str) -> SplitResult:
    try:
        return urlsplit(raw)
    except ValueError as exc:
        if "[" in raw or "]" in raw:
            raise _reject(raw, UrlErrorKind.INVALID_IPV6, str(exc)) from exc
        raise _reject(raw, UrlErrorKind.OTHER, str(exc)) from exc


def _check_port(raw: str, parts: SplitResult) -> int | None:
    try:
        return parts.port
    except ValueError as exc:
        raise _reject(raw, UrlErrorKind.INVALID_PORT, str(exc)) from exc


def _check_host(raw: str, parts: SplitResult) -> str:
    host = parts.hostname or ""

    if "[" in parts.netloc:
        try:
            ipaddress.IPv6Address(host)
        except ValueError as exc:
            raise _reject(raw, UrlErrorKind.INVALID_IPV6, str(exc)) from exc
        return host

    if not host:
        if parts.scheme in _SPECIAL_SCHEMES:
            raise _reject(raw, UrlErrorKind.OTHER, "empty host")
        return host

    labels = host.split(".")
    if len(labels) > 1 and labels[-1] == "":
        labels.pop()
    if _NUMERIC_LABEL.match(labels[-1]):
        try:
            ipaddress.IPv4Address(".".join(labels))
        except ValueError as exc:
            raise _reject(raw, UrlErrorKind.INVALID_IPV4, str(exc)) from exc

    return host


def _reject(raw: str, kind: UrlErrorKind, detail: str = "") -> UrlValidationError:
    logger.debug("Rejected URL %r: %s (%s)", raw, kind.value, detail)
    return UrlValidationError(kind, detail)
