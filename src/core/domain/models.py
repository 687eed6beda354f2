"""Domain models (Pydantic v2).

These models live as long as one request: they are created from the CLI
options and discarded once the response is printed. Nothing is cached or
shared between runs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RequestOptions(BaseModel):
    """Options as parsed by the CLI.

    If both ``form_data`` and ``json_data`` are set, ``json_data`` wins.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        description="Target URL as typed by the user.",
    )
    method: str | None = Field(
        default=None,
        description="Explicit HTTP method (-X/--method).",
    )
    form_data: str | None = Field(
        default=None,
        description="Form body such as 'a=1&b=2' (-d/--data).",
    )
    json_data: str | None = Field(
        default=None,
        description="Unparsed JSON body (--json).",
    )

    @property
    def has_body(self) -> bool:
        return self.form_data is not None or self.json_data is not None


class ValidatedUrl(BaseModel):
    """URL that passed structural parsing and the scheme allowlist."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., min_length=1)
    scheme: str = Field(..., description="'http' or 'https'.")
    host: str = Field(..., min_length=1)
    port: int | None = Field(default=None, ge=0, le=65535)

    def __str__(self) -> str:
        return self.raw


class OutgoingRequest(BaseModel):
    """Request ready for the transport."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(..., min_length=1)
    url: ValidatedUrl
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = Field(
        default=None,
        description="Encoded body (form or JSON).",
    )

    @property
    def content_type(self) -> str | None:
        return self.headers.get("Content-Type")


class InboundResponse(BaseModel):
    """Response received from the server."""

    status_code: int = Field(..., ge=0)
    body_text: str | None = Field(
        default=None,
        description="Decoded body; None when it could not be read.",
    )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


class FormattedOutput(BaseModel):
    """Final text for the user."""

    text: str
    success: bool = True
