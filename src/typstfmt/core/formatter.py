"""Built-in text formatter.

:func:`format_document` is a pure function of its inputs: no I/O, no
global state.  It is idempotent — formatting already formatted text
returns it unchanged — which is what makes check mode meaningful.
"""

from __future__ import annotations

from typstfmt.core.config import Config


def _expand_leading_tabs(line: str, indent_space: int) -> str:
    stripped = line.lstrip("\t")
    tabs = len(line) - len(stripped)
    return " " * (tabs * indent_space) + stripped


def format_document(content: str, config: Config) -> str:
    """Normalize whitespace in *content* according to *config*.

    * Line endings become ``\\n``.
    * Leading tabs become ``indent_space`` spaces each.
    * Trailing whitespace is stripped when ``trim_trailing_whitespace``.
    * Leading blank lines are dropped and inner runs of blank lines are
      capped at ``max_blank_lines``.
    * Non-empty output ends with exactly one newline when
      ``final_newline`` and carries no trailing newline otherwise;
      whitespace-only input formats to ``""``.
    """
    lines: list[str] = []
    blank_run = 0
    for raw in content.splitlines():
        line = _expand_leading_tabs(raw, config.indent_space)
        if config.trim_trailing_whitespace:
            line = line.rstrip(" \t")

        if not line.strip():
            if not lines:
                continue
            blank_run += 1
            if blank_run > config.max_blank_lines:
                continue
            line = line if not config.trim_trailing_whitespace else ""
        else:
            blank_run = 0
        lines.append(line)

    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""

    text = "\n".join(lines)
    if config.final_newline:
        return text + "\n"
    return text
