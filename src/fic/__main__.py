"""Allow ``python -m fic`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m fic`` behaves identically to the ``fic`` console
script.
"""

from __future__ import annotations

from fic.cli.app import cli

if __name__ == "__main__":
    cli()
