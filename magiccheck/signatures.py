"""
Well-known magic numbers and parsing of user-supplied ones.

get_signature(name)  → Signature      (case-insensitive)
parse_magic(text)    → bytes

parse_magic accepts hex ("89504E47", "89 50 4E 47", "0x89,0x50") or a
literal prefixed with "str:" ("str:%PDF-").
"""

from __future__ import annotations

import re
from dataclasses import dataclass

STR_PREFIX: str = "str:"
_HEX_SEPARATORS = re.compile(r"[\s,:_-]+")


@dataclass(frozen=True)
class Signature:
    name: str
    magic: bytes
    description: str


SIGNATURES: dict[str, Signature] = {s.name: s for s in (
    Signature("PDF",    b"%PDF-",                          "PDF document"),
    Signature("PNG",    b"\x89PNG\r\n\x1a\n",              "PNG image"),
    Signature("JPEG",   b"\xff\xd8\xff",                   "JPEG image"),
    Signature("GIF87A", b"GIF87a",                         "GIF87a image"),
    Signature("GIF89A", b"GIF89a",                         "GIF89a image"),
    Signature("ZIP",    b"PK\x03\x04",                     "ZIP archive"),
    Signature("GZIP",   b"\x1f\x8b\x08",                   "GZIP archive"),
    Signature("BZIP2",  b"BZh",                            "BZIP2 archive"),
    Signature("7Z",     b"7z\xbc\xaf\x27\x1c",             "7-Zip archive"),
    Signature("RAR",    b"Rar!\x1a\x07",                   "RAR archive"),
    Signature("ZSTD",   b"\x28\xb5\x2f\xfd",               "Zstandard frame"),
    Signature("ELF",    b"\x7fELF",                        "ELF executable"),
    Signature("PE",     b"MZ",                             "Windows PE executable"),
    Signature("OGG",    b"OggS",                           "Ogg container"),
    Signature("FLAC",   b"fLaC",                           "FLAC audio"),
    Signature("SQLITE", b"SQLite format 3\x00",            "SQLite 3 database"),
)}


def get_signature(name: str) -> Signature:
    """Look up a known signature by name, ignoring case."""
    key = name.strip().upper()
    try:
        return SIGNATURES[key]
    except KeyError:
        choices = ", ".join(sorted(SIGNATURES))
        raise KeyError(f"Unknown format {name!r} (choose from: {choices})") from None


def parse_magic(text: str) -> bytes:
    """Parse a magic number written as hex digits or as ``str:<literal>``."""
    if text.startswith(STR_PREFIX):
        return text[len(STR_PREFIX):].encode("utf-8")

    parts = [p for p in _HEX_SEPARATORS.split(text.strip()) if p]
    out = bytearray()
    for part in parts:
        if part[:2].lower() == "0x":
            part = part[2:]
            # 0x-prefixed tokens name a single byte each
            if len(part) == 1:
                part = "0" + part
        if not part or len(part) % 2:
            raise ValueError(f"Malformed hex byte {part!r} in {text!r}")
        try:
            out.extend(bytes.fromhex(part))
        except ValueError:
            raise ValueError(f"Invalid hex in magic number {text!r}") from None
    return bytes(out)
