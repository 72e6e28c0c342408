"""CLI application entry point and command routing for typstfmt.

This module is the **sole error boundary** for the entire application.
It catches :class:`~typstfmt.exceptions.TypstfmtError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
messages on the Rich stderr console and returning well-defined exit
codes.

Architecture notes
------------------
* No business logic lives here — parsing lives in
  :mod:`typstfmt.cli.arguments`, the run loop in the core layer and all
  file access in the infrastructure layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rich.markup import escape

from typstfmt.cli import exit_codes
from typstfmt.cli.arguments import MakeDefaultConfig, UsageHint, resolve_arguments
from typstfmt.cli.console import console, notify
from typstfmt.core.format_service import FormatService
from typstfmt.core.formatter import format_document
from typstfmt.core.models import Check, RunSettings
from typstfmt.core.modes import validate_destination
from typstfmt.exceptions import TypstfmtError
from typstfmt.infra.config_loader import load_config, make_default_config
from typstfmt.infra.inputs import read_documents
from typstfmt.infra.sinks import SinkWriter


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_usage_hint(hint: UsageHint) -> int:
    """Report the first unrecognised token and exit successfully."""
    notify(f"unexpected argument {hint.unexpected[0]!r}")
    notify("use -h or --help")
    return exit_codes.SUCCESS


def _handle_make_default_config(action: MakeDefaultConfig) -> int:
    """Scaffold the default config file."""
    path = make_default_config(action.path)
    notify(f"Created config file at: {path}")
    return exit_codes.SUCCESS


def _handle_format(settings: RunSettings) -> int:
    """Run the read → format → dispatch loop.

    Flow:
    1. Reject a multi-file run aimed at one output file.
    2. Load the config once (defaults when the file is absent).
    3. Pull documents lazily and hand each to the active sink.
    4. Map the folded run state to an exit code.
    """
    validate_destination(settings.source, settings.sink)
    config = load_config(settings.config_path)

    writer = SinkWriter(settings.sink, verbose=settings.verbose, notify=notify)
    service = FormatService(format_document, config, writer)
    state = service.run(read_documents(settings.source))

    if settings.verbose and isinstance(settings.sink, Check):
        notify(
            f"{state.processed} file(s) processed, "
            f"{state.mismatched} need formatting."
        )

    if state.exit_status:
        return exit_codes.NEEDS_FORMATTING
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the typstfmt CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    resolved = resolve_arguments(argv)

    if isinstance(resolved, UsageHint):
        return _handle_usage_hint(resolved)
    if isinstance(resolved, MakeDefaultConfig):
        return _handle_make_default_config(resolved)
    return _handle_format(resolved)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TypstfmtError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.FATAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
