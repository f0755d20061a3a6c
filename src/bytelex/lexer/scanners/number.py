"""Numeric literal scanner mixin."""

from bytelex.lexer.charsets import DIGITS, DOT
from bytelex.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing the INT/FLOAT rule."""

    _pos: int

    def _current_byte(self) -> int:
        """Byte at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _peek(self, offset: int = 1) -> int:
        """Byte at cursor + offset. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> None:
        """Consume one byte. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create token for source[start_pos:pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_number(self) -> Token:
        """Scan a maximal run of digits, absorbing every dot that precedes a digit.

        A dot is only part of the number when the next byte is a digit,
        so "3." is INT "3" and the dot is left for the next token. The
        lookahead applies at every dot: "1.2.3" is a single FLOAT.

        Returns:
            INT token, or FLOAT if at least one dot was absorbed.
        """
        start = self._pos
        kind = TokenKind.INT

        while True:
            byte = self._current_byte()
            if byte in DIGITS:
                pass
            elif byte == DOT and self._peek() in DIGITS:
                kind = TokenKind.FLOAT
            else:
                break
            self._advance()

        return self._make_token(kind, start)
