"""Command-line token dump.

Scans a file (``-f PATH``) or the positional words joined with single
spaces, and prints one ``row:col Kind -> value`` line per token up to
and including the first terminal token.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bytelex import __version__
from bytelex.config import ScanConfig, scan_config_context
from bytelex.errors import SourceReadError
from bytelex.lexer import Scanner
from bytelex.source import read_source


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytelex",
        description="Print the token stream of a file or of the given words.",
    )
    parser.add_argument("words", nargs="*", help="text to scan, joined with single spaces")
    parser.add_argument("-f", "--file", type=Path, default=None, help="scan the bytes of this file instead")
    parser.add_argument("--skip-whitespace", action="store_true", help="do not print Whitespace tokens")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file is not None:
        try:
            data = read_source(args.file)
        except SourceReadError as exc:
            print(f"bytelex: error: {exc}", file=sys.stderr)
            return 1
        scanner = Scanner(data, source_file=str(args.file))
    else:
        scanner = Scanner.from_args(args.words)

    with scan_config_context(ScanConfig(skip_whitespace=args.skip_whitespace)):
        for token in scanner.tokenize():
            print(token)
    return 0
