"""Infrastructure layer — filesystem and stream I/O.

Every raw ``OSError`` / ``UnicodeDecodeError`` is caught here and
re-raised as a :class:`~typstfmt.exceptions.TypstfmtError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output of its own; messages go through callbacks.
"""

from typstfmt.infra.config_loader import load_config, make_default_config
from typstfmt.infra.inputs import read_documents, read_file
from typstfmt.infra.sinks import SinkWriter, write_text

__all__: list[str] = [
    "SinkWriter",
    "load_config",
    "make_default_config",
    "read_documents",
    "read_file",
    "write_text",
]
