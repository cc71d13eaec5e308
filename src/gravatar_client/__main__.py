"""Run script.

Why it exists:
- Allows running the CLI with `python -m gravatar_client` during development.
- Keeps a simple entry point alongside the installed console script.
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; rich output needs utf-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from gravatar_client.cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
