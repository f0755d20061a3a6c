"""
bytelex — pull-based byte-stream tokenizer.

Turns a raw byte buffer into classified tokens (whitespace, integers,
floats, identifiers, single-character punctuation) one at a time, and
stops at the first byte it cannot classify.

Quick Start:
    >>> from bytelex import Scanner
    >>> scanner = Scanner(b"3.5")
    >>> print(scanner.next_token())
    1:4 Float -> 3.5
    >>> scanner.next_token().kind
    <TokenKind.NULL: 'Null'>

    >>> # Or collect the whole stream
    >>> from bytelex import tokenize
    >>> [t.format_kind() for t in tokenize(b"abc123")]
    ['Identifier', 'Int', 'Null']

Installation:
    pip install bytelex              # Core scanner (zero deps)
"""

import os

from bytelex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from bytelex.errors import BytelexError, SourceReadError
from bytelex.lexer import Scanner
from bytelex.location import SourceLocation
from bytelex.source import join_args, read_source
from bytelex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(data: bytes | bytearray | memoryview, *, source_file: str | None = None) -> list[Token]:
    """Scan ``data`` to completion.

    Args:
        data: Raw input bytes
        source_file: Optional file label for token locations

    Returns:
        All tokens up to and including the first NULL or INVALID token
        (whitespace omitted if ``ScanConfig.skip_whitespace`` is set).
    """
    return list(Scanner(data, source_file=source_file).tokenize())


def tokenize_file(path: str | os.PathLike[str], *, source_file: str | None = None) -> list[Token]:
    """Read ``path`` and scan its bytes to completion.

    Raises:
        SourceReadError: If the file cannot be read. No scan happens.
    """
    data = read_source(path)
    return tokenize(data, source_file=source_file if source_file is not None else os.fspath(path))


__all__ = [  # noqa: RUF022 — grouped by category
    # Version
    "__version__",
    # Core API
    "tokenize",
    "tokenize_file",
    "Scanner",
    # Tokens
    "Token",
    "TokenKind",
    "SourceLocation",
    # Input
    "read_source",
    "join_args",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "BytelexError",
    "SourceReadError",
]
