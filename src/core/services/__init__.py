"""Core services: one pure function per pipeline stage."""

from core.services.method_resolver import resolve_method
from core.services.request_builder import build_request, parse_form_pairs
from core.services.request_pipeline import PipelineHooks, PipelineResult, run_request
from core.services.response_formatter import format_response, render_sorted_json
from core.services.url_validator import validate_url

__all__ = [
    "PipelineHooks",
    "PipelineResult",
    "build_request",
    "format_response",
    "parse_form_pairs",
    "resolve_method",
    "render_sorted_json",
    "run_request",
    "validate_url",
]
