"""Development entry point (no install needed).

Run the CLI from a checkout with::

    python -m main https://example.com

The code lives under `src/`, so it is added to `sys.path` before importing
the `cli` package.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
