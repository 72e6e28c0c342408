"""Tests for document acquisition (infra/inputs.py).

Coverage:
* Stdin yields exactly one document named ``stdin``.
* Files yield one document per path, in order, bytes preserved.
* Reading is lazy: a bad path fails only when reached.
* Every read failure surfaces as InputReadError.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from typstfmt.core.models import Document, Files, Stdin
from typstfmt.exceptions import InputReadError
from typstfmt.infra.inputs import read_documents


class _BrokenStream(io.StringIO):
    def read(self, size: int | None = -1) -> str:
        raise OSError("device not ready")


class TestStdin:
    def test_single_document(self) -> None:
        docs = list(read_documents(Stdin(), stdin=io.StringIO("#let a = 1")))
        assert docs == [Document(name="stdin", content="#let a = 1")]

    def test_defaults_to_sys_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("piped"))
        (doc,) = read_documents(Stdin())
        assert doc.content == "piped"

    def test_read_failure_is_fatal(self) -> None:
        with pytest.raises(InputReadError, match="stdin"):
            list(read_documents(Stdin(), stdin=_BrokenStream()))


class TestFiles:
    def test_documents_in_order(self, tmp_path: Path) -> None:
        first = tmp_path / "b.typ"
        second = tmp_path / "a.typ"
        first.write_text("B")
        second.write_text("A")

        docs = list(read_documents(Files((str(first), str(second)))))
        assert [d.name for d in docs] == [str(first), str(second)]
        assert [d.content for d in docs] == ["B", "A"]

    def test_line_endings_preserved(self, tmp_path: Path) -> None:
        path = tmp_path / "crlf.typ"
        path.write_bytes(b"a\r\nb\r\n")
        (doc,) = read_documents(Files((str(path),)))
        assert doc.content == "a\r\nb\r\n"

    def test_same_path_twice_yields_two_documents(self, tmp_path: Path) -> None:
        path = tmp_path / "dup.typ"
        path.write_text("x")
        docs = list(read_documents(Files((str(path), str(path)))))
        assert len(docs) == 2

    def test_missing_file_is_fatal(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "missing.typ")
        with pytest.raises(InputReadError, match="missing.typ"):
            list(read_documents(Files((missing,))))

    def test_undecodable_file_is_fatal(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.typ"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(InputReadError, match="latin1.typ"):
            list(read_documents(Files((str(path),))))

    def test_reading_is_lazy(self, tmp_path: Path) -> None:
        good = tmp_path / "good.typ"
        good.write_text("ok")
        missing = str(tmp_path / "missing.typ")

        documents = read_documents(Files((str(good), missing)))
        assert next(documents).content == "ok"
        with pytest.raises(InputReadError):
            next(documents)
