"""Request orchestration.

This module strings the stages together for one invocation:

    method resolver -> URL validator -> request builder -> transport
    -> response formatter

The CLI delegates the whole flow to `run_request` and only decides how to
print what comes back. Lines the user should see before the response
(requested URL, method, echoed body) go through `PipelineHooks.announce` in
the order they happen, so a failure at any stage still leaves the earlier
lines on screen. A failure stops the run; later stages never execute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.config import AppSettings
from core.domain.errors import CurlLiteError
from core.domain.models import FormattedOutput, RequestOptions
from core.interfaces.transport import HttpTransport
from core.services.method_resolver import resolve_method
from core.services.request_builder import build_request
from core.services.response_formatter import format_response
from core.services.url_validator import validate_url

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    announce: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    method: str
    output: FormattedOutput | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output is not None and self.output.success


def run_request(
    options: RequestOptions,
    transport: HttpTransport,
    hooks: PipelineHooks | None = None,
    settings: AppSettings | None = None,
) -> PipelineResult:
    """Run one request from parsed options to formatted output."""

    hooks = hooks or PipelineHooks()
    settings = settings or AppSettings()

    def announce(line: str) -> None:
        if hooks.announce:
            hooks.announce(line)

    method = resolve_method(
        options.method,
        has_form_data=options.form_data is not None,
        has_json_data=options.json_data is not None,
    )
    logger.debug("Resolved method %s for %s", method, options.url)

    announce(f"Requesting URL: {options.url}")
    announce(f"Method: {method}")

    try:
        url = validate_url(options.url)
        request = build_request(method, url, options, announce=announce)
        logger.info("%s %s", request.method, request.url)
        response = transport.send(request)
    except CurlLiteError as exc:
        logger.info("Request aborted: %s", exc.message)
        return PipelineResult(method=method, error=exc.message)

    logger.info("Received status %s", response.status_code)
    return PipelineResult(
        method=method,
        output=format_response(response, indent=settings.json_indent),
    )
