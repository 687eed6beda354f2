"""Core settings.

Environment variables are read in one place (pydantic-settings) so the CLI
and the HTTP adapter share the same defaults.

No configuration file is read: without environment variables the CLI keeps
its default behavior.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__


class AppSettings(BaseSettings):
    """Application settings, prefixed `CURL_LITE_`."""

    model_config = SettingsConfigDict(
        env_prefix="CURL_LITE_",
        extra="ignore",
        case_sensitive=False,
    )

    user_agent: str = Field(
        default=f"curl-lite/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow redirects.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indent of the sorted-key JSON output.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level on stderr (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
