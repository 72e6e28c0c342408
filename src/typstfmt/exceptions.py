"""Custom exception hierarchy for typstfmt.

Every fatal condition raised below the CLI layer must inherit from
:class:`TypstfmtError`.  Raw ``OSError`` / ``UnicodeDecodeError`` must
NEVER propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here, carrying the offending
path and the underlying cause in the message.

Check-mode mismatches are *not* exceptions; they are ordinary outcomes
folded into the exit status.

Hierarchy
---------
TypstfmtError
├── InputReadError
├── OutputWriteError
├── ConfigParseError
├── ConfigExistsError
└── OutputConflictError
"""

from __future__ import annotations


class TypstfmtError(Exception):
    """Base exception for all typstfmt errors.

    Every fatal condition maps to a subclass of this exception so that
    the CLI error boundary can render a clean message and abort the run
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputReadError(TypstfmtError):
    """Raised when stdin, an input file or the config file cannot be read."""


# --- Output ----------------------------------------------------------------

class OutputWriteError(TypstfmtError):
    """Raised when a destination cannot be opened or written."""


class OutputConflictError(TypstfmtError):
    """Raised when several inputs would be written to one output file."""


# --- Configuration ---------------------------------------------------------

class ConfigParseError(TypstfmtError):
    """Raised when a config file exists but is not a valid configuration."""


class ConfigExistsError(TypstfmtError):
    """Raised when scaffolding would overwrite an existing config file."""
