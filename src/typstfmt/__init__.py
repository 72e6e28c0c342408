"""typstfmt — command-line dispatcher for a pure Typst text formatter.

Reads documents from stdin or files, formats them, and routes the result
in place, to stdout, to a single output file, or through a check.
"""

from typstfmt.version import __version__

__all__: list[str] = ["__version__"]
