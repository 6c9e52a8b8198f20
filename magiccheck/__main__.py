"""
magiccheck — verify files start with an expected magic number.

Usage:
    python -m magiccheck check <path> [<path>...] (--magic HEX | --format NAME) [--quiet]
    python -m magiccheck formats

Exit status: 0 all files match, 1 some file failed, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from .files import check_files
from .report import NullReporter, ResultReporter, print_signatures
from .signatures import SIGNATURES, get_signature, parse_magic

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        level=level,
    )


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_formats(args: argparse.Namespace) -> int:
    """List the built-in signatures."""
    print_signatures(SIGNATURES.values())
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    """Check files/folders against a magic number."""
    err = Console(stderr=True)

    try:
        if args.format:
            expected = get_signature(args.format).magic
        else:
            expected = parse_magic(args.magic)
    except (KeyError, ValueError) as exc:
        err.print(_error_text(exc.args[0]))
        return EXIT_USAGE

    reporter: ResultReporter | NullReporter
    if args.quiet:
        reporter = NullReporter(expected)
    else:
        reporter = ResultReporter(expected)

    try:
        for result in check_files(args.paths, expected):
            reporter.add(result)
    except FileNotFoundError as exc:
        err.print(_error_text(str(exc)))
        return EXIT_USAGE

    if not reporter.results:
        err.print("No files to check.")
        return EXIT_USAGE

    reporter.finish()
    return EXIT_FAILED if reporter.failed else EXIT_OK


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error_text(message: str) -> Text:
    return Text.assemble(("Error: ", "red"), message)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magiccheck",
        description="magiccheck — verify files start with an expected magic number")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    # --- check ---
    p_check = sub.add_parser("check", help="Check files against a magic number")
    p_check.add_argument("paths", nargs="+", help="Files or directories to check")
    which = p_check.add_mutually_exclusive_group(required=True)
    which.add_argument("--magic",
                       help="Expected bytes as hex (89504E47) or str:<text>")
    which.add_argument("--format",
                       help="Name of a built-in format (see 'formats')")
    p_check.add_argument("--quiet", action="store_true",
                         help="No table, exit status only")

    # --- formats ---
    sub.add_parser("formats", help="List built-in formats")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    handlers = {
        "check":   cmd_check,
        "formats": cmd_formats,
    }
    sys.exit(handlers[args.command](args))


if __name__ == "__main__":
    main()
