"""Mode-resolution rules applied after argument parsing.

Both functions are pure and run before any document is read, so an
invalid combination is rejected without partial work.
"""

from __future__ import annotations

from typstfmt.core.models import (
    Files,
    InPlace,
    InputSource,
    OutputSink,
    Stdin,
    Stdout,
    ToFile,
)
from typstfmt.exceptions import OutputConflictError


def resolve_sink(source: InputSource, sink: OutputSink | None) -> OutputSink:
    """Return the effective sink for *source*.

    No explicit sink means :class:`InPlace`, except for stdin, which has
    no file to overwrite and goes to :class:`Stdout` instead.
    """
    if sink is None:
        sink = InPlace()
    if isinstance(source, Stdin) and isinstance(sink, InPlace):
        return Stdout()
    return sink


def validate_destination(source: InputSource, sink: OutputSink) -> None:
    """Reject a single output file fed by more than one document.

    Raises
    ------
    OutputConflictError
        When *sink* is :class:`ToFile` and *source* names several files.
    """
    if isinstance(sink, ToFile) and isinstance(source, Files) and len(source) > 1:
        raise OutputConflictError(
            "You specified multiple inputs and --output but one output file "
            "cannot receive the result of many files.",
            hint="Drop --output to format in place, or use --output - for stdout.",
        )
