"""Shared pytest fixtures and configuration for the typstfmt test suite.

Guidelines
----------
* Tests never touch the real working directory — use ``workdir``.
* Core tests must be pure — no side effects.
* The formatter is replaced with a tiny fake wherever the test is about
  dispatch rather than formatting.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from typstfmt.core.config import Config


def fake_format(content: str, config: Config) -> str:
    """Normalise ``x=1`` to ``x = 1`` and end with one newline."""
    return content.replace("x=1", "x = 1").rstrip("\n") + "\n"


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def fake_formatter(monkeypatch: pytest.MonkeyPatch) -> None:
    """Swap the built-in formatter used by the CLI for :func:`fake_format`."""
    from typstfmt.cli import app as app_module

    monkeypatch.setattr(app_module, "format_document", fake_format)
