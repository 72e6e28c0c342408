"""Formatting configuration and its TOML codec.

:class:`Config` is an immutable value produced once per run and shared
by every formatting call.  Parsing and rendering work on strings only;
reading the file from disk is the job of
:mod:`typstfmt.infra.config_loader`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from typstfmt.exceptions import ConfigParseError

CONFIG_FILE_NAME: str = "typstfmt.toml"

_MAX_COUNT: int = 1024
"""Largest value accepted for an integer option."""

_REGENERATE_HINT = (
    "You'll maybe have to delete it and use -C to create a default config file."
)


@dataclass(frozen=True, slots=True)
class Config:
    """Options understood by :func:`~typstfmt.core.formatter.format_document`."""

    indent_space: int = 2
    """Spaces substituted for each leading tab."""

    max_blank_lines: int = 1
    """Longest run of consecutive blank lines that is kept."""

    trim_trailing_whitespace: bool = True
    """Strip spaces and tabs at the end of every line."""

    final_newline: bool = True
    """End non-empty output with exactly one newline."""

    # ------------------------------------------------------------------
    # TOML codec
    # ------------------------------------------------------------------

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Parse *text* as a typstfmt TOML document.

        Raises
        ------
        ConfigParseError
            On TOML syntax errors, unknown keys, wrongly typed values or
            negative counts.
        """
        try:
            data: dict[str, Any] = tomlkit.parse(text).unwrap()
        except TOMLKitError as exc:
            raise ConfigParseError(
                f"Config file invalid: {exc}.", hint=_REGENERATE_HINT,
            ) from exc

        expected = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(expected))
        if unknown:
            raise ConfigParseError(
                f"Config file invalid: unknown key(s) {', '.join(unknown)}.",
                hint=_REGENERATE_HINT,
            )

        values: dict[str, Any] = {}
        for key, value in data.items():
            values[key] = _check_value(key, expected[key], value)
        return cls(**values)

    @classmethod
    def default_toml(cls) -> str:
        """Render the default configuration as a TOML document."""
        default = cls()
        doc = tomlkit.document()
        doc.add(tomlkit.comment("typstfmt configuration"))
        for f in fields(cls):
            doc.add(f.name, getattr(default, f.name))
        return tomlkit.dumps(doc)


def _check_value(key: str, type_name: str, value: Any) -> Any:
    """Validate one parsed value against the field's declared type."""
    # ``from __future__ import annotations`` keeps field types as strings.
    if type_name == "bool":
        if not isinstance(value, bool):
            raise ConfigParseError(
                f"Config file invalid: {key} must be true or false.",
                hint=_REGENERATE_HINT,
            )
        return value

    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigParseError(
            f"Config file invalid: {key} must be an integer.",
            hint=_REGENERATE_HINT,
        )
    if not 0 <= value <= _MAX_COUNT:
        raise ConfigParseError(
            f"Config file invalid: {key} must be between 0 and {_MAX_COUNT}.",
            hint=_REGENERATE_HINT,
        )
    return value
