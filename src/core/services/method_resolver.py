"""HTTP method inference."""

from __future__ import annotations

DEFAULT_METHOD = "GET"


def resolve_method(explicit_method: str | None, *, has_form_data: bool, has_json_data: bool) -> str:
    """Return the method the request will be announced with.

    An explicit method is returned verbatim, except that a GET (in any case)
    combined with a body becomes POST, the same as an unset method.
    """

    method = explicit_method if explicit_method is not None else DEFAULT_METHOD
    if method.upper() == DEFAULT_METHOD and (has_json_data or has_form_data):
        return "POST"
    return method
