"""Rich UI helpers for the CLI.

Everything the user reads goes to standard output. Plain lines, response
bodies included, are written straight to the console file so tabs, carriage
returns and other control characters reach the terminal unchanged; only the
``Error:`` prefix goes through Rich styling.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from core.domain.models import FormattedOutput


def build_console(*, stderr: bool = False) -> Console:
    """Console with markup, emoji codes and highlighting turned off."""

    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def print_line(console: Console, line: str) -> None:
    console.file.write(f"{line}\n")
    console.file.flush()


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error:", "bold red"), " ", message))


def print_output(console: Console, output: FormattedOutput) -> None:
    if output.success:
        print_line(console, output.text)
    else:
        print_error(console, output.text)


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich, away from the response."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=build_console(stderr=True), show_path=False)],
    )
    logging.getLogger().setLevel(level)
