"""Infrastructure: reading documents from stdin or files.

:func:`read_documents` is a generator, so each document is read only
when the consumer asks for it and exactly once.  A failure to read any
document raises :class:`~typstfmt.exceptions.InputReadError`; documents
later in the list are then never opened.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from typstfmt.core.models import STDIN_NAME, Document, Files, InputSource, Stdin
from typstfmt.exceptions import InputReadError


def _read_stdin(stream: TextIO | None) -> Document:
    stream = stream if stream is not None else sys.stdin
    try:
        content = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Couldn't read stdin: {exc}") from exc
    return Document(name=STDIN_NAME, content=content)


def read_file(path: str) -> Document:
    """Read *path* fully, preserving its line endings."""
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise InputReadError(f"Failed to open file {path!r}: {exc}") from exc
    with handle:
        try:
            content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Couldn't read file {path!r}: {exc}") from exc
    return Document(name=path, content=content)


def read_documents(
    source: InputSource,
    *,
    stdin: TextIO | None = None,
) -> Iterator[Document]:
    """Yield the documents of *source* lazily, in order.

    Parameters
    ----------
    source:
        :class:`Stdin` yields a single document named ``"stdin"``;
        :class:`Files` yields one document per path.
    stdin:
        Stream to read instead of :data:`sys.stdin`.

    Raises
    ------
    InputReadError
        While iterating, when a document cannot be read.
    """
    if isinstance(source, Stdin):
        yield _read_stdin(stdin)
    elif isinstance(source, Files):
        for path in source.paths:
            yield read_file(path)
    else:
        raise TypeError(f"unknown input source: {source!r}")
