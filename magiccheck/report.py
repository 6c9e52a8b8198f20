"""
Result rendering — rich tables.

Usage::

    reporter = ResultReporter(expected=b"%PDF-")
    for result in check_files(paths, b"%PDF-"):
        reporter.add(result)
    reporter.finish()
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .checker import render_bytes
from .files import FileResult
from .signatures import Signature


def _hex(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


class ResultReporter:
    """Collects file results and prints them as one table."""

    def __init__(self, expected: bytes, console: Optional[Console] = None) -> None:
        self.expected = expected
        self.results: list[FileResult] = []
        self._console = console or Console()

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    def finish(self) -> None:
        table = Table(
            title=Text(f"Magic number {render_bytes(self.expected)!r} ({_hex(self.expected)})"),
            expand=True,
        )
        table.add_column("", width=2, no_wrap=True)
        table.add_column("File", style="bold", overflow="fold")
        table.add_column("Detail", style="dim", overflow="fold")

        for r in self.results:
            if r.ok:
                table.add_row(Text("✓", style="green"), Text(str(r.path)), "")
            else:
                # paths and rendered bytes may contain "[", keep them out of markup
                table.add_row(Text("✗", style="bold red"), Text(str(r.path)), Text(str(r.error)))

        self._console.print(table)
        passed = len(self.results) - self.failed
        style = "green" if self.failed == 0 else "red"
        self._console.print(
            f"[{style}]{passed} passed, {self.failed} failed[/] "
            f"of {len(self.results)} file(s)"
        )


class NullReporter:
    """Drop-in no-op replacement when --quiet is set."""

    def __init__(self, expected: bytes, console: Optional[Console] = None) -> None:
        self.expected = expected
        self.results: list[FileResult] = []

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    def finish(self) -> None: ...


def print_signatures(signatures: Iterable[Signature], console: Optional[Console] = None) -> None:
    """Print known signatures as a table."""
    table = Table(title="Known formats")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Magic (hex)", no_wrap=True)
    table.add_column("Description")
    for sig in signatures:
        table.add_row(sig.name, _hex(sig.magic), sig.description)
    (console or Console()).print(table)
