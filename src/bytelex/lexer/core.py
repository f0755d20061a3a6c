"""Pull-based byte scanner.

Classifies the byte under the cursor, consumes a token's worth of
bytes, and returns one Token per ``next_token()`` call. Scanning stops
for good at end of input or at the first byte no rule accepts.

Thread Safety:
Scanner instances are single-use and single-owner. Create one per buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bytelex.config import get_scan_config
from bytelex.lexer.charsets import (
    DIGITS,
    IDENTIFIER_BYTES,
    NEWLINE,
    NO_BYTE,
    PUNCTUATION,
    WHITESPACE,
)
from bytelex.lexer.scanners import (
    IdentifierScannerMixin,
    NumberScannerMixin,
    WhitespaceScannerMixin,
)
from bytelex.source import join_args
from bytelex.tokens import Token, TokenKind
from bytelex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    IdentifierScannerMixin,
    NumberScannerMixin,
    WhitespaceScannerMixin,
):
    """Byte-stream scanner producing one classified token per call.

    Dispatch order for the byte under the cursor:
    1. letter or ``_``  -> IDENTIFIER (maximal run)
    2. digit            -> INT / FLOAT
    3. ASCII punctuation -> PONCT (one byte)
    4. ASCII whitespace -> WHITESPACE (maximal run)
    5. anything else    -> INVALID (one byte, then the scan halts),
       or NULL at end of input

    Every token's ``loc`` is the ``(row, col)`` reached *after* its bytes
    were consumed. ``col`` counts consumed bytes and is never reset at a
    newline; only ``row`` moves.

    Usage:
            >>> scanner = Scanner(b"x=3.5")
            >>> for token in scanner.tokenize():
            ...     print(token)
        1:2 Identifier -> x
        1:3 Ponct -> =
        1:6 Float -> 3.5
        1:6 Null ->

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_row",
        "_col",
        "_source_file",
    )

    def __init__(self, data: bytes | bytearray | memoryview, *, source_file: str | None = None) -> None:
        """Initialize scanner with the input buffer.

        Args:
            data: Raw input; copied into an immutable ``bytes``
            source_file: Optional file label for token locations.
                Defaults to ``ScanConfig.source_file``.
        """
        self._source = bytes(data)
        self._source_len = len(self._source)
        self._pos = 0
        self._row = 1
        self._col = 1
        self._source_file = source_file if source_file is not None else get_scan_config().source_file

    @classmethod
    def from_args(cls, args: Iterable[str], *, source_file: str | None = None) -> Scanner:
        """Build a scanner over ``args`` joined with single spaces."""
        return cls(join_args(args), source_file=source_file)

    @classmethod
    def from_text(cls, text: str, *, source_file: str | None = None) -> Scanner:
        """Build a scanner over the UTF-8 encoding of ``text``."""
        return cls(text.encode("utf-8"), source_file=source_file)

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unconsumed byte."""
        return self._pos

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def is_exhausted(self) -> bool:
        """True once the cursor has reached the end of the buffer."""
        return self._pos >= self._source_len

    def next_token(self) -> Token:
        """Consume and return the next token.

        Never raises. After the first NULL or INVALID token every further
        call returns NULL at the same location.
        """
        byte = self._current_byte()

        if byte in IDENTIFIER_BYTES:
            return self._scan_identifier()

        if byte in DIGITS:
            return self._scan_number()

        if byte in PUNCTUATION:
            start = self._pos
            self._advance()
            return self._make_token(TokenKind.PONCT, start)

        if byte in WHITESPACE:
            return self._scan_whitespace()

        if self._pos < self._source_len:
            return self._halt_on_invalid()

        return self._make_token(TokenKind.NULL, self._pos)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first terminal token.

        WHITESPACE tokens are skipped when ``ScanConfig.skip_whitespace``
        is set; they are still consumed.

        Yields:
            Token objects one at a time
        """
        skip_whitespace = get_scan_config().skip_whitespace
        while True:
            token = self.next_token()
            if skip_whitespace and token.kind is TokenKind.WHITESPACE:
                continue
            yield token
            if token.kind.is_terminal:
                return

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _current_byte(self) -> int:
        """Byte at the cursor, or NO_BYTE at end of input."""
        if self._pos >= self._source_len:
            return NO_BYTE
        return self._source[self._pos]

    def _peek(self, offset: int = 1) -> int:
        """Byte at cursor + offset, or NO_BYTE past the end."""
        index = self._pos + offset
        if index >= self._source_len:
            return NO_BYTE
        return self._source[index]

    def _advance(self) -> None:
        """Consume one byte. Updates row/col tracking."""
        if self._source[self._pos] == NEWLINE:
            self._row += 1
        self._pos += 1
        self._col += 1

    def _halt_on_invalid(self) -> Token:
        """Emit the unclassifiable byte as INVALID and end the scan."""
        start = self._pos
        self._advance()
        token = self._make_token(TokenKind.INVALID, start)
        logger.debug(
            "Invalid byte 0x%02x at offset %d; skipping %d remaining bytes",
            self._source[start],
            start,
            self._source_len - self._pos,
        )
        self._pos = self._source_len
        return token

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create a token for source[start_pos:pos] at the current location.

        Bytes that are not valid UTF-8 decode to U+FFFD.
        """
        value = self._source[start_pos : self._pos].decode("utf-8", errors="replace")
        return Token(kind, value, (self._row, self._col), self._source_file)
