"""Infrastructure: delivering formatted documents to their destination.

:class:`SinkWriter` satisfies
:class:`~typstfmt.core.protocols.DocumentWriter` and holds one handler
per :data:`~typstfmt.core.models.OutputSink` variant.  Informational
messages are not printed here; they are handed to the optional
*notify* callback, and only when *verbose* is set.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from typstfmt.core.models import (
    Check,
    Document,
    InPlace,
    Outcome,
    OutputSink,
    Stdout,
    ToFile,
)
from typstfmt.exceptions import OutputWriteError


def write_text(path: str, text: str) -> None:
    """Create or truncate *path* and write *text* to it unchanged."""
    try:
        handle = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputWriteError(f"Couldn't open file {path!r}: {exc}") from exc
    with handle:
        try:
            handle.write(text)
        except OSError as exc:
            raise OutputWriteError(
                f"Failed to write to file {path!r}: {exc}",
            ) from exc


class SinkWriter:
    """Concrete :class:`DocumentWriter` for the four output modes.

    Parameters
    ----------
    sink:
        The active output mode.
    verbose:
        Emit informational messages and, for stdout, a delimiter line
        ahead of each document.
    notify:
        Receives informational messages.  Ignored unless *verbose*.
    stdout:
        Stream used by :class:`Stdout` instead of :data:`sys.stdout`.
    """

    def __init__(
        self,
        sink: OutputSink,
        *,
        verbose: bool = False,
        notify: Callable[[str], None] | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.sink: OutputSink = sink
        self._verbose = verbose
        self._notify = notify
        self._stdout = stdout

    def _info(self, message: str) -> None:
        if self._verbose and self._notify is not None:
            self._notify(message)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def write(self, document: Document, formatted: str) -> Outcome:
        """Dispatch *document* to the handler of the active sink."""
        sink = self.sink
        if isinstance(sink, InPlace):
            return self._write_in_place(document, formatted)
        if isinstance(sink, Check):
            return self._check(document, formatted)
        if isinstance(sink, Stdout):
            return self._write_stdout(document, formatted)
        if isinstance(sink, ToFile):
            return self._write_to_file(sink.path, document, formatted)
        raise TypeError(f"unknown output sink: {sink!r}")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _write_in_place(self, document: Document, formatted: str) -> Outcome:
        # Stdin never reaches here: resolve_sink turns it into Stdout.
        if formatted == document.content:
            self._info(f"file: {document.name!r} up to date.")
            return Outcome.UNCHANGED
        write_text(document.name, formatted)
        self._info(f"file: {document.name!r} overwritten.")
        return Outcome.WRITTEN

    def _check(self, document: Document, formatted: str) -> Outcome:
        if formatted != document.content:
            self._info(f"{document.name} needs formatting.")
            return Outcome.MISMATCH
        self._info(f"{document.name} is already formatted.")
        return Outcome.UNCHANGED

    def _write_stdout(self, document: Document, formatted: str) -> Outcome:
        stream = self._stdout if self._stdout is not None else sys.stdout
        try:
            if self._verbose:
                stream.write(f"=== {document.name!r} ===\n")
            stream.write(formatted)
            stream.flush()
        except OSError as exc:
            raise OutputWriteError(f"Couldn't write to stdout: {exc}") from exc
        return Outcome.WRITTEN

    def _write_to_file(self, path: str, document: Document, formatted: str) -> Outcome:
        write_text(path, formatted)
        self._info(f"{document.name} written to {path}.")
        return Outcome.WRITTEN
