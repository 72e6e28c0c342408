"""Command-line argument resolution.

Turns ``argv`` into exactly one of:

* :class:`UsageHint` — an unrecognised token was seen; print a hint and
  exit successfully without formatting anything.
* :class:`MakeDefaultConfig` — scaffold the default config file.
* :class:`~typstfmt.core.models.RunSettings` — a complete run.

``--version`` and ``--help`` are handled by argparse itself, which
prints and raises ``SystemExit(0)``.

The output-mode flags (``--output``, ``--stdout``, ``--check``) share
one destination attribute, so the last one given wins.  Every token after
the first ``--`` is a file name, even when it starts with ``-``.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from typstfmt.core.config import CONFIG_FILE_NAME
from typstfmt.core.models import Check, Files, RunSettings, Stdin, Stdout, ToFile
from typstfmt.core.modes import resolve_sink
from typstfmt.version import __version__

_EPILOG = """\
If no file is specified, stdin will be used.
Files will be overwritten unless --output is passed.

In check mode nothing is written; the exit status is 0 when every
input is formatted correctly and 1 when formatting is required.
"""


@dataclass(frozen=True, slots=True)
class UsageHint:
    """At least one token was not recognised."""

    unexpected: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MakeDefaultConfig:
    """Write the default configuration file and stop."""

    path: str = CONFIG_FILE_NAME


Resolution = Union[UsageHint, MakeDefaultConfig, RunSettings]


class _OutputAction(argparse.Action):
    """``--output VALUE``: ``-`` means stdout, anything else a file path."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        sink = Stdout() if values == "-" else ToFile(values)
        setattr(namespace, self.dest, sink)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="typstfmt",
        description="Format Typst code",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"version: {__version__}",
        help="Prints the current version.",
    )
    parser.add_argument(
        "-C",
        "--make-default-config",
        action="store_true",
        help=f"Create a default config file at {CONFIG_FILE_NAME}.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="sink",
        action=_OutputAction,
        metavar="PATH",
        help="If not specified, files will be overwritten. '-' for stdout.",
    )
    parser.add_argument(
        "--stdout",
        dest="sink",
        action="store_const",
        const=Stdout(),
        help="Same as `--output -` (kept for compatibility).",
    )
    parser.add_argument(
        "--check",
        dest="sink",
        action="store_const",
        const=Check(),
        help=(
            "Run in 'check' mode. Exits with 0 if input is formatted "
            "correctly, 1 if formatting is required."
        ),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Report what happens to each input.",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        default=CONFIG_FILE_NAME,
        metavar="PATH",
        help=f"Path to the config file (default: ./{CONFIG_FILE_NAME}).",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="file",
        help="Files to format in order.",
    )
    parser.set_defaults(sink=None)
    return parser


def resolve_arguments(argv: Sequence[str] | None = None) -> Resolution:
    """Resolve *argv* (default ``sys.argv[1:]``) into the action to take.

    Raises
    ------
    SystemExit
        From argparse, for ``--help``/``--version`` (status 0) and for a
        flag missing its value (status 2).
    """
    tokens = list(argv) if argv is not None else sys.argv[1:]
    trailing: list[str] = []
    # Everything after the first ``--`` is a file, even if it starts with ``-``.
    if "--" in tokens:
        split = tokens.index("--")
        tokens, trailing = tokens[:split], tokens[split + 1:]

    parser = build_parser()
    args, unexpected = parser.parse_known_intermixed_args(tokens)

    if unexpected:
        return UsageHint(unexpected=tuple(unexpected))
    if args.make_default_config:
        return MakeDefaultConfig()

    files = [*(args.files or ()), *trailing]
    source = Files(tuple(files)) if files else Stdin()
    return RunSettings(
        source=source,
        sink=resolve_sink(source, args.sink),
        verbose=args.verbose,
        config_path=args.config_path,
    )
