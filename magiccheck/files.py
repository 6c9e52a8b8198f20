"""
File/folder walker and per-file magic number checks.

walk_targets(paths) → Iterator[Path]
    Recursively yields every file in *paths*.
    Directories are walked recursively; individual files are emitted as-is.

check_file(path, expected) → FileResult
    Opens *path* and checks that it starts with *expected*. Failures are
    captured in the result instead of raised, so one bad file does not stop
    a batch.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .checker import MagicNumberCheckError, check_magic_number

log = logging.getLogger("magiccheck.files")


@dataclass
class FileResult:
    path: Path
    error: Optional[MagicNumberCheckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def walk_targets(paths: list[str | Path]) -> Iterator[Path]:
    """
    Yield a Path for each file found under *paths*.

    * A plain file → yielded as given.
    * A directory  → all files inside, in sorted order.
    """
    for raw in paths:
        p = Path(raw)
        if p.is_file():
            yield p
        elif p.is_dir():
            for root, dirs, files in os.walk(p):
                dirs.sort()
                for fname in sorted(files):
                    yield Path(root) / fname
        else:
            raise FileNotFoundError(f"Path not found: {p}")


def check_file(path: Path | str, expected: bytes) -> FileResult:
    path = Path(path)
    try:
        with open(path, "rb") as fh:
            check_magic_number(fh, expected)
    except MagicNumberCheckError as exc:
        log.info("%s: %s", path, exc)
        return FileResult(path=path, error=exc)
    except OSError as exc:
        # open() failures belong to the same I/O kind as read failures
        log.info("%s: %s", path, exc)
        return FileResult(path=path, error=MagicNumberCheckError.from_io(exc))
    log.debug("%s: magic number OK", path)
    return FileResult(path=path)


def check_files(paths: list[str | Path], expected: bytes) -> Iterator[FileResult]:
    """Check every file under *paths* against *expected*."""
    for path in walk_targets(paths):
        yield check_file(path, expected)
