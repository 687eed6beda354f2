from __future__ import annotations

import pytest

from core.domain.errors import UrlErrorKind, UrlValidationError
from core.services.url_validator import validate_url

BASE_PROTOCOL = "The URL does not have a valid base protocol."


def _kind_of(raw: str) -> UrlValidationError:
    with pytest.raises(UrlValidationError) as excinfo:
        validate_url(raw)
    return excinfo.value


@pytest.mark.parametrize("raw", ["not a url", "example.com/path", "/relative/path", ""])
def test_missing_scheme(raw: str) -> None:
    err = _kind_of(raw)
    assert err.kind is UrlErrorKind.MISSING_BASE_PROTOCOL
    assert err.message == BASE_PROTOCOL


@pytest.mark.parametrize("raw", ["ftp://host", "mailto:someone@example.com", "file:///etc/hosts"])
def test_unsupported_scheme_shares_message(raw: str) -> None:
    err = _kind_of(raw)
    assert err.kind is UrlErrorKind.UNSUPPORTED_SCHEME
    assert err.message == BASE_PROTOCOL


@pytest.mark.parametrize("raw", ["http://host:99999", "http://host:abc/", "ftp://host:70000"])
def test_invalid_port(raw: str) -> None:
    err = _kind_of(raw)
    assert err.kind is UrlErrorKind.INVALID_PORT
    assert err.message == "The URL contains an invalid port number."


@pytest.mark.parametrize("raw", ["http://999.1.1.1/", "http://1.2.3/", "http://10.0.0.256"])
def test_invalid_ipv4(raw: str) -> None:
    err = _kind_of(raw)
    assert err.kind is UrlErrorKind.INVALID_IPV4
    assert err.message == "The URL contains an invalid IPv4 address."


@pytest.mark.parametrize("raw", ["http://[::1", "http://[zz]/", "http://[1:2:3]/"])
def test_invalid_ipv6(raw: str) -> None:
    err = _kind_of(raw)
    assert err.kind is UrlErrorKind.INVALID_IPV6
    assert err.message == "The URL contains an invalid IPv6 address."


def test_empty_host_is_reported_verbatim() -> None:
    err = _kind_of("http://")
    assert err.kind is UrlErrorKind.OTHER
    assert err.message == "empty host"


def test_valid_https_url() -> None:
    url = validate_url("https://example.com:8443/items?page=2")
    assert url.scheme == "https"
    assert url.host == "example.com"
    assert url.port == 8443
    assert str(url) == "https://example.com:8443/items?page=2"


@pytest.mark.parametrize(
    ("raw", "host"),
    [
        ("http://127.0.0.1/", "127.0.0.1"),
        ("http://[::1]:8080/", "::1"),
        ("http://localhost", "localhost"),
        ("http://api.v2.example.com/", "api.v2.example.com"),
    ],
)
def test_valid_hosts(raw: str, host: str) -> None:
    assert validate_url(raw).host == host


def test_surrounding_whitespace_is_trimmed() -> None:
    assert str(validate_url("  http://example.com/  ")) == "http://example.com/"
