"""Tests for the run loop (core/format_service.py) and run-state folding.

All tests use a fake writer — no filesystem access.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from typstfmt.core.config import Config
from typstfmt.core.format_service import FormatService
from typstfmt.core.models import Document, Outcome, RunState
from typstfmt.exceptions import InputReadError


def _upper(content: str, config: Config) -> str:
    return content.upper()


def _writer(*outcomes: Outcome) -> MagicMock:
    writer = MagicMock()
    writer.write.side_effect = list(outcomes)
    return writer


def _docs(*contents: str) -> list[Document]:
    return [Document(name=f"{i}.typ", content=c) for i, c in enumerate(contents)]


class TestRunState:
    def test_initial_state(self) -> None:
        assert RunState() == RunState(exit_status=0, processed=0, mismatched=0)

    def test_mismatch_sets_status(self) -> None:
        state = RunState().record(Outcome.MISMATCH)
        assert state.exit_status == 1
        assert state.mismatched == 1

    def test_status_is_sticky(self) -> None:
        state = RunState().record(Outcome.MISMATCH)
        state = state.record(Outcome.UNCHANGED).record(Outcome.WRITTEN)
        assert state.exit_status == 1
        assert state.processed == 3


class TestFormatService:
    def test_formats_and_dispatches_each_document(self) -> None:
        writer = _writer(Outcome.WRITTEN, Outcome.WRITTEN)
        docs = _docs("a", "b")

        state = FormatService(_upper, Config(), writer).run(docs)

        assert [c.args for c in writer.write.call_args_list] == [
            (docs[0], "A"),
            (docs[1], "B"),
        ]
        assert state == RunState(exit_status=0, processed=2, mismatched=0)

    def test_any_mismatch_fails_the_run(self) -> None:
        writer = _writer(Outcome.UNCHANGED, Outcome.MISMATCH, Outcome.UNCHANGED)
        state = FormatService(_upper, Config(), writer).run(_docs("A", "b", "C"))
        assert state.exit_status == 1
        assert state.mismatched == 1

    def test_no_documents(self) -> None:
        writer = _writer()
        state = FormatService(_upper, Config(), writer).run([])
        assert state == RunState()
        writer.write.assert_not_called()

    def test_config_is_shared(self) -> None:
        config = Config(indent_space=7)
        seen: list[Config] = []

        def _record(content: str, cfg: Config) -> str:
            seen.append(cfg)
            return content

        writer = _writer(Outcome.UNCHANGED, Outcome.UNCHANGED)
        FormatService(_record, config, writer).run(_docs("a", "b"))
        assert all(cfg is config for cfg in seen)
        assert len(seen) == 2

    def test_source_failure_stops_the_run(self) -> None:
        writer = _writer(Outcome.WRITTEN)

        def _source() -> Iterator[Document]:
            yield Document(name="ok.typ", content="a")
            raise InputReadError("Failed to open file 'gone.typ'")
            yield Document(name="never.typ", content="b")  # pragma: no cover

        with pytest.raises(InputReadError):
            FormatService(_upper, Config(), writer).run(_source())
        assert writer.write.call_count == 1
