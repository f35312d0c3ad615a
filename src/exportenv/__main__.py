# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the exportenv CLI (run via ``exportenv`` or ``python -m exportenv``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from exportenv.cli import cli
    except ImportError:
        sys.stderr.write("exportenv CLI dependencies missing. Install with: pip install exportenv\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
