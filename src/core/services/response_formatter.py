"""Response rendering.

JSON bodies are shown with the keys of every object sorted, at all nesting
depths; anything else, including JSON too deeply nested to decode, is shown
as raw text.
"""

from __future__ import annotations

import json
from typing import Any

from core.domain.models import FormattedOutput, InboundResponse

NO_BODY_SENTINEL = "No response body."


def reject_constant(name: str) -> Any:
    """`parse_constant` hook: NaN and Infinity are not JSON."""

    raise ValueError(f"{name} is not valid JSON")


def render_sorted_json(text: str, *, indent: int = 2) -> str | None:
    """Pretty-print ``text`` with sorted keys, or None when it is not JSON."""

    try:
        parsed = json.loads(text, parse_constant=reject_constant)
        return json.dumps(parsed, ensure_ascii=False, indent=indent, sort_keys=True)
    except (ValueError, RecursionError):
        return None


def format_response(response: InboundResponse, *, indent: int = 2) -> FormattedOutput:
    """Render ``response`` for the terminal.

    A non-2xx status only reports the code; the body is never shown.
    """

    if not response.is_success:
        return FormattedOutput(
            text=f"Request failed with status code: {response.status_code}.",
            success=False,
        )

    if response.body_text is None:
        return FormattedOutput(text=f"Response body:\n{NO_BODY_SENTINEL}")

    pretty = render_sorted_json(response.body_text, indent=indent)
    if pretty is None:
        return FormattedOutput(text=f"Response body:\n{response.body_text}")
    return FormattedOutput(text=f"Response body (JSON with sorted keys):\n{pretty}")
