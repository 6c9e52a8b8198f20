"""Tests for rich table rendering."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from magiccheck.checker import MagicNumberCheckError
from magiccheck.files import FileResult
from magiccheck.report import NullReporter, ResultReporter, print_signatures
from magiccheck.signatures import get_signature


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def test_reporter_table_and_summary(console: Console) -> None:
    reporter = ResultReporter(b"%PDF-", console=console)
    reporter.add(FileResult(path=Path("ok.pdf")))
    reporter.add(FileResult(
        path=Path("[draft].pdf"),
        error=MagicNumberCheckError.from_mismatch(b"%PDF-", b"\x89PNG\r"),
    ))
    reporter.finish()

    out = console.file.getvalue()
    assert reporter.failed == 1
    assert "25 50 44 46 2D" in out
    assert "[draft].pdf" in out
    assert "Read '[89, 50, 4E, 47, D]'" in out
    assert "1 passed, 1 failed of 2 file(s)" in out


def test_null_reporter_counts_silently() -> None:
    reporter = NullReporter(b"MZ")
    reporter.add(FileResult(path=Path("a.exe")))
    reporter.finish()
    assert reporter.failed == 0
    assert len(reporter.results) == 1


def test_print_signatures(console: Console) -> None:
    print_signatures([get_signature("pdf"), get_signature("zip")], console=console)
    out = console.file.getvalue()
    assert "25 50 44 46 2D" in out
    assert "ZIP archive" in out
