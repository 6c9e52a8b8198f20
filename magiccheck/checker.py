"""
Magic number check — verify a stream starts with a fixed byte prefix.

check_magic_number(stream, expected) → None
    Reads exactly len(expected) bytes and compares them to *expected*.
    Raises MagicNumberCheckError on failure:

      kind = IO              the stream could not produce len(expected) bytes
      kind = MAGIC_MISMATCH  the bytes were read but differ from *expected*

Mismatch messages render each sequence as UTF-8 text when it decodes,
otherwise as an uppercase hex listing: [89, 50, 4E, 47].
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MISMATCH_TEMPLATE: str = "Incorrect Magic Number: Expected '{expected}', Read '{read}'"
MISMATCH_DESCRIPTION: str = "A Magic Number check Failed"
HEX_SEPARATOR: str = ", "


# ---------------------------------------------------------------------------
# Error model
# ---------------------------------------------------------------------------

class CheckErrorKind(IntEnum):
    IO             = 0x01
    MAGIC_MISMATCH = 0x02


def render_bytes(data: bytes) -> str:
    """Return *data* as UTF-8 text if it decodes, else as a hex byte list."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return "[" + HEX_SEPARATOR.join(f"{b:X}" for b in data) + "]"


@dataclass(frozen=True)
class WrongMagicNumber:
    expected: bytes
    read: bytes

    def __str__(self) -> str:
        return MISMATCH_TEMPLATE.format(
            expected=render_bytes(self.expected),
            read=render_bytes(self.read),
        )


class MagicNumberCheckError(Exception):
    """
    Failure of a magic number check.

    Exactly one of *io_error* / *mismatch* is set, selected by *kind*.
    Build instances with :meth:`from_io` or :meth:`from_mismatch`.
    """

    def __init__(
        self,
        kind: CheckErrorKind,
        io_error: Optional[BaseException] = None,
        mismatch: Optional[WrongMagicNumber] = None,
    ) -> None:
        if kind == CheckErrorKind.IO and (io_error is None or mismatch is not None):
            raise ValueError("IO errors carry io_error only")
        if kind == CheckErrorKind.MAGIC_MISMATCH and (mismatch is None or io_error is not None):
            raise ValueError("MAGIC_MISMATCH errors carry mismatch only")
        super().__init__(kind, io_error if io_error is not None else mismatch)
        self.kind = kind
        self.io_error = io_error
        self.mismatch = mismatch

    @classmethod
    def from_io(cls, exc: BaseException) -> MagicNumberCheckError:
        return cls(CheckErrorKind.IO, io_error=exc)

    @classmethod
    def from_mismatch(cls, expected: bytes, read: bytes) -> MagicNumberCheckError:
        return cls(
            CheckErrorKind.MAGIC_MISMATCH,
            mismatch=WrongMagicNumber(expected=bytes(expected), read=bytes(read)),
        )

    def __reduce__(self):
        # args holds (kind, detail), which does not line up with __init__
        return type(self), (self.kind, self.io_error, self.mismatch)

    @property
    def description(self) -> str:
        if self.kind == CheckErrorKind.IO:
            return str(self.io_error)
        return MISMATCH_DESCRIPTION

    def __str__(self) -> str:
        if self.kind == CheckErrorKind.IO:
            return str(self.io_error)
        return str(self.mismatch)

    def __repr__(self) -> str:
        detail = self.io_error if self.kind == CheckErrorKind.IO else self.mismatch
        return f"{type(self).__name__}({self.kind.name}, {detail!r})"


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def read_exact(stream: Any, n: int) -> bytes:
    """
    Read exactly *n* bytes from *stream*. Raises EOFError if it ends first,
    BlockingIOError if a non-blocking stream has nothing ready and OSError
    for other read failures (including a closed stream).

    *stream* is any binary file-like object with ``read``; objects exposing
    only ``recv`` (sockets) are read through that instead.
    """
    pull = getattr(stream, "read", None) or stream.recv
    buf = bytearray()
    while len(buf) < n:
        try:
            chunk = pull(n - len(buf))
        except ValueError as exc:
            # io raises ValueError for reads on closed files
            raise OSError(str(exc)) from exc
        if chunk is None:
            raise BlockingIOError(
                errno.EAGAIN, f"Stream has no data ready after {len(buf)} of {n} bytes"
            )
        if not chunk:
            raise EOFError(f"Stream ended after {len(buf)} of {n} bytes")
        buf.extend(chunk)
    return bytes(buf)


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------

def check_magic_number(stream: Any, expected: bytes) -> None:
    """
    Consume ``len(expected)`` bytes from *stream* and compare to *expected*.

    Returns None on a match. Raises MagicNumberCheckError with kind IO when
    the read fails (short stream or OSError) and kind MAGIC_MISMATCH when
    the bytes differ. An empty *expected* always matches and reads nothing.
    """
    expected = bytes(expected)
    if not expected:
        return
    try:
        read = read_exact(stream, len(expected))
    except (OSError, EOFError) as exc:
        raise MagicNumberCheckError.from_io(exc) from exc
    if read != expected:
        raise MagicNumberCheckError.from_mismatch(expected, read)
