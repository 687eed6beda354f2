"""curl-lite command.

Parses the command line into `RequestOptions`, runs the request pipeline
against the httpx transport and prints what comes back.
"""

from __future__ import annotations

import typer

from adapters.http_client import HttpxTransport, build_client
from cli.ui_components import build_console, configure_logging, print_error, print_line, print_output
from core import __version__
from core.config import AppSettings
from core.domain.models import RequestOptions
from core.services.request_pipeline import PipelineHooks, run_request

app = typer.Typer(
    add_completion=False,
    help="Issue one HTTP request and print the response.",
)


def build_transport(settings: AppSettings) -> HttpxTransport:
    return HttpxTransport(build_client(settings))


def _version_callback(value: bool) -> None:
    if value:
        print_line(build_console(), f"curl-lite {__version__}")
        raise typer.Exit()


@app.command()
def request(
    url: str = typer.Argument(..., help="Target URL (http or https)."),
    method: str | None = typer.Option(None, "-X", "--method", help="HTTP method override."),
    data: str | None = typer.Option(None, "-d", "--data", help="Form body, e.g. 'a=1&b=2'."),
    json_data: str | None = typer.Option(None, "--json", help="JSON body."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log request details to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Send a request to URL.

    Without -X, passing -d or --json turns the request into a POST.
    """

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    console = build_console()

    options = RequestOptions(url=url, method=method, form_data=data, json_data=json_data)
    hooks = PipelineHooks(announce=lambda line: print_line(console, line))

    with build_transport(settings) as transport:
        result = run_request(options, transport, hooks=hooks, settings=settings)

    if result.error is not None:
        print_error(console, result.error)
    elif result.output is not None:
        print_output(console, result.output)

    if not result.ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()
