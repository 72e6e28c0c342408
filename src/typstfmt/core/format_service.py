"""Core format service — drives the read → format → dispatch cycle.

The service receives its collaborators at construction time: the pure
formatter, the shared :class:`~typstfmt.core.config.Config` and a
:class:`~typstfmt.core.protocols.DocumentWriter`.  Documents are pulled
one at a time from any iterable, so a lazy source is consumed on demand
and an exception raised while producing or writing a document aborts
the run before later documents are touched.

Guarantees
----------
* Pure orchestration — no I/O of its own, no ``print()``.
* The exit status is threaded through :class:`RunState`, never held in
  a global.
"""

from __future__ import annotations

from collections.abc import Iterable

from typstfmt.core.config import Config
from typstfmt.core.models import Document, RunState
from typstfmt.core.protocols import DocumentWriter, Formatter


class FormatService:
    """Single-pass, synchronous formatting run.

    Parameters
    ----------
    formatter:
        Pure ``(content, config) -> formatted`` callable.
    config:
        Configuration shared read-only by every document of the run.
    writer:
        Destination receiving each document and its formatted text.
    """

    def __init__(
        self,
        formatter: Formatter,
        config: Config,
        writer: DocumentWriter,
    ) -> None:
        self._formatter: Formatter = formatter
        self._config: Config = config
        self._writer: DocumentWriter = writer

    def process(self, document: Document, state: RunState) -> RunState:
        """Format and dispatch one document, returning the updated state."""
        formatted = self._formatter(document.content, self._config)
        outcome = self._writer.write(document, formatted)
        return state.record(outcome)

    def run(self, documents: Iterable[Document]) -> RunState:
        """Process every document in order and return the final state."""
        state = RunState()
        for document in documents:
            state = self.process(document, state)
        return state
