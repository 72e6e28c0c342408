"""Core / service layer — pure logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O.
* No imports from ``cli`` or ``infra``.
"""

from typstfmt.core.config import CONFIG_FILE_NAME, Config
from typstfmt.core.format_service import FormatService
from typstfmt.core.formatter import format_document
from typstfmt.core.models import (
    Check,
    Document,
    Files,
    InPlace,
    InputSource,
    Outcome,
    OutputSink,
    RunSettings,
    RunState,
    Stdin,
    Stdout,
    ToFile,
)
from typstfmt.core.protocols import DocumentWriter, Formatter

__all__: list[str] = [
    "CONFIG_FILE_NAME",
    "Check",
    "Config",
    "Document",
    "DocumentWriter",
    "Files",
    "FormatService",
    "Formatter",
    "InPlace",
    "InputSource",
    "Outcome",
    "OutputSink",
    "RunSettings",
    "RunState",
    "Stdin",
    "Stdout",
    "ToFile",
    "format_document",
]
