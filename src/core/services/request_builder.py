"""Request construction and body encoding."""

from __future__ import annotations

import json
import logging
from typing import Callable
from urllib.parse import urlencode

from core.domain.errors import InvalidJsonBodyError, MissingBodyError
from core.domain.models import OutgoingRequest, RequestOptions, ValidatedUrl
from core.services.response_formatter import reject_constant

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def parse_form_pairs(data: str) -> list[tuple[str, str]]:
    """Split ``a=1&b=2`` into pairs; pieces without ``=`` are dropped."""

    pairs: list[tuple[str, str]] = []
    for piece in data.split("&"):
        key, sep, value = piece.partition("=")
        if sep:
            pairs.append((key, value))
    return pairs


def encode_form(data: str) -> bytes:
    return urlencode(parse_form_pairs(data)).encode("ascii")


def encode_json(data: str) -> bytes:
    """Parse ``data`` and re-serialize it compactly as UTF-8.

    Raises:
        InvalidJsonBodyError: when ``data`` is not a JSON document, uses
            NaN/Infinity, nests too deeply, or holds a lone surrogate.
    """

    try:
        parsed = json.loads(data, parse_constant=reject_constant)
        return json.dumps(parsed, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (ValueError, RecursionError) as exc:
        raise InvalidJsonBodyError(str(exc)) from exc


def build_request(
    method: str,
    url: ValidatedUrl,
    options: RequestOptions,
    *,
    announce: Callable[[str], None] | None = None,
) -> OutgoingRequest:
    """Build the request for the resolved ``method``.

    Only ``POST`` (exact spelling) carries a body; any other method,
    including ``post``, is sent as a plain GET.
    For POST the JSON body takes priority over the form body. The raw body
    string is passed to ``announce`` before it is encoded.

    Raises:
        MissingBodyError: POST without ``--json`` nor ``-d``.
        InvalidJsonBodyError: ``--json`` value does not parse.
    """

    if method != "POST":
        if options.has_body:
            logger.debug("Method %s sends no body; ignoring request data", method)
        return OutgoingRequest(method="GET", url=url)

    if options.json_data is not None:
        if announce:
            announce(f"JSON: {options.json_data}")
        body = encode_json(options.json_data)
        content_type = JSON_CONTENT_TYPE
    elif options.form_data is not None:
        if announce:
            announce(f"Data: {options.form_data}")
        body = encode_form(options.form_data)
        content_type = FORM_CONTENT_TYPE
    else:
        raise MissingBodyError()

    return OutgoingRequest(
        method="POST",
        url=url,
        headers={"Content-Type": content_type},
        body=body,
    )
