"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — in check mode, every input was already formatted."""

NEEDS_FORMATTING: int = 1
"""Check mode found at least one input whose formatted form differs."""

FATAL_ERROR: int = 2
"""A TypstfmtError aborted the run.  Also argparse's status for bad flag values."""

UNEXPECTED_ERROR: int = 3
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
