"""Infrastructure: locating, reading and scaffolding the config file."""

from __future__ import annotations

from typstfmt.core.config import CONFIG_FILE_NAME, Config
from typstfmt.exceptions import ConfigExistsError, InputReadError, OutputWriteError


def load_config(path: str = CONFIG_FILE_NAME) -> Config:
    """Return the configuration stored at *path*.

    A file that cannot be opened (missing, a directory, no permission)
    is not an error: the built-in defaults are returned instead.

    Raises
    ------
    InputReadError
        When the file opens but cannot be read or decoded.
    ConfigParseError
        When the file's contents are not a valid configuration.
    """
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        return Config()
    with handle:
        try:
            text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(
                f"Failed to read config file {path!r}: {exc}",
            ) from exc
    return Config.from_toml(text)


def make_default_config(path: str = CONFIG_FILE_NAME) -> str:
    """Write the default configuration to *path*, which must not exist yet.

    Returns the path written.

    Raises
    ------
    ConfigExistsError
        When *path* already exists.
    OutputWriteError
        When the file cannot be created or written.
    """
    try:
        handle = open(path, "x", encoding="utf-8")
    except FileExistsError as exc:
        raise ConfigExistsError(
            f"Couldn't create a new config file at {path}: it already exists.",
            hint="Delete it first if you want to regenerate the defaults.",
        ) from exc
    except OSError as exc:
        raise OutputWriteError(
            f"Couldn't create a new config file at {path}: {exc}",
        ) from exc
    with handle:
        try:
            handle.write(Config.default_toml())
        except OSError as exc:
            raise OutputWriteError(
                f"Failed to write to file {path!r}: {exc}",
            ) from exc
    return path
