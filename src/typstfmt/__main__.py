"""Allow ``python -m typstfmt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m typstfmt`` behaves identically to the ``typstfmt``
console script.
"""

from __future__ import annotations

from typstfmt.cli.app import cli

if __name__ == "__main__":
    cli()
