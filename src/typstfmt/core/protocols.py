"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the formatter and the infrastructure
sink writer must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol

from typstfmt.core.config import Config
from typstfmt.core.models import Document, Outcome


class Formatter(Protocol):
    """Contract for the pure formatting function.

    :func:`~typstfmt.core.formatter.format_document` satisfies it, as does
    any plain function with the same signature.
    """

    def __call__(self, content: str, config: Config) -> str:
        """Return the formatted form of *content* under *config*.

        Must be pure and idempotent: formatting its own output again
        yields the same text.
        """
        ...  # pragma: no cover


class DocumentWriter(Protocol):
    """Contract for output destinations.

    Implementations map every I/O failure to
    :class:`~typstfmt.exceptions.OutputWriteError`.
    """

    def write(self, document: Document, formatted: str) -> Outcome:
        """Deliver *formatted* (the formatted *document*) and report what happened.

        Only check mode may return :attr:`Outcome.MISMATCH`.

        Raises
        ------
        OutputWriteError
            When the destination cannot be opened or written.
        """
        ...  # pragma: no cover
