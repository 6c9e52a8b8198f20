"""Tests for file walking and per-file checks."""

from pathlib import Path

import pytest

from magiccheck.checker import CheckErrorKind
from magiccheck.files import check_file, check_files, walk_targets


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "b.pdf").write_bytes(b"%PDF-1.7 body")
    (tmp_path / "docs" / "a.pdf").write_bytes(b"%PDF-1.4 body")
    (tmp_path / "docs" / "nested").mkdir()
    (tmp_path / "docs" / "nested" / "fake.pdf").write_bytes(b"GIF89a....")
    (tmp_path / "docs" / "empty.pdf").write_bytes(b"")
    return tmp_path


def test_walk_targets_sorted_recursive(tree: Path) -> None:
    found = [p.relative_to(tree).as_posix() for p in walk_targets([tree / "docs"])]
    assert found == ["docs/a.pdf", "docs/b.pdf", "docs/empty.pdf", "docs/nested/fake.pdf"]


def test_walk_targets_plain_file(tree: Path) -> None:
    target = tree / "docs" / "a.pdf"
    assert list(walk_targets([str(target)])) == [target]


def test_walk_targets_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(walk_targets([tmp_path / "nope"]))


def test_check_file_ok(tree: Path) -> None:
    result = check_file(tree / "docs" / "a.pdf", b"%PDF-")
    assert result.ok
    assert result.error is None


def test_check_file_mismatch(tree: Path) -> None:
    result = check_file(tree / "docs" / "nested" / "fake.pdf", b"%PDF-")
    assert not result.ok
    assert result.error.kind == CheckErrorKind.MAGIC_MISMATCH
    assert result.error.mismatch.read == b"GIF89"


def test_check_file_too_short_is_io(tree: Path) -> None:
    result = check_file(tree / "docs" / "empty.pdf", b"%PDF-")
    assert result.error.kind == CheckErrorKind.IO


def test_check_file_open_failure_is_io(tmp_path: Path) -> None:
    result = check_file(tmp_path, b"%PDF-")
    assert result.error.kind == CheckErrorKind.IO
    assert isinstance(result.error.io_error, OSError)


def test_check_files(tree: Path) -> None:
    results = list(check_files([tree / "docs"], b"%PDF-"))
    assert [r.ok for r in results] == [True, True, False, False]
