"""Run the CLI from `src/` with `python -m main URL`."""

from __future__ import annotations

import sys

# Response bodies are printed verbatim; cp1252 consoles cannot encode them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
