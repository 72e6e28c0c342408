"""Shared Rich console for diagnostics and informational messages.

Everything the CLI says to the user goes to stderr, so standard output
carries nothing but formatted documents.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def notify(message: str) -> None:
    """Print a plain informational *message*, escaping any markup in it."""
    console.print(escape(message))
