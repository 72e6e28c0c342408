"""Domain models for typstfmt.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The two closed choices of a run, where
text comes from and where it goes, are expressed as unions of small
tag classes rather than as an open class hierarchy:

* :data:`InputSource` — :class:`Stdin` or :class:`Files`.
* :data:`OutputSink` — :class:`InPlace`, :class:`Check`,
  :class:`Stdout` or :class:`ToFile`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Document:
    """One unit of text plus the name it is displayed under."""

    name: str
    """Path as given on the command line, or ``"stdin"``."""

    content: str
    """Full text of the document, read exactly once."""


STDIN_NAME: str = "stdin"


# ---------------------------------------------------------------------------
# Input sources
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Stdin:
    """Read a single document from standard input."""


@dataclass(frozen=True, slots=True)
class Files:
    """Read one document per path, in the given order."""

    paths: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.paths)


InputSource = Union[Stdin, Files]


# ---------------------------------------------------------------------------
# Output sinks
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InPlace:
    """Overwrite each source file when its formatted form differs."""


@dataclass(frozen=True, slots=True)
class Check:
    """Compare only; never write anything."""


@dataclass(frozen=True, slots=True)
class Stdout:
    """Concatenate formatted documents onto standard output."""


@dataclass(frozen=True, slots=True)
class ToFile:
    """Write the (single) formatted document to a fixed path."""

    path: str


OutputSink = Union[InPlace, Check, Stdout, ToFile]


class Outcome(enum.Enum):
    """Result of handing one document to a sink."""

    UNCHANGED = "unchanged"
    WRITTEN = "written"
    MISMATCH = "mismatch"


# ---------------------------------------------------------------------------
# Run configuration and state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunSettings:
    """Fully resolved command-line invocation."""

    source: InputSource
    sink: OutputSink
    verbose: bool
    config_path: str


@dataclass(frozen=True, slots=True)
class RunState:
    """Accumulated result of a run, folded one outcome at a time.

    ``exit_status`` is sticky: once a mismatch sets it to ``1`` no later
    outcome resets it.
    """

    exit_status: int = 0
    processed: int = 0
    mismatched: int = 0

    def record(self, outcome: Outcome) -> RunState:
        """Return the state after one more document produced *outcome*."""
        if outcome is Outcome.MISMATCH:
            return RunState(
                exit_status=1,
                processed=self.processed + 1,
                mismatched=self.mismatched + 1,
            )
        return RunState(
            exit_status=self.exit_status,
            processed=self.processed + 1,
            mismatched=self.mismatched,
        )
