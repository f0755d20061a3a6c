"""Whitespace scanner mixin."""

from bytelex.lexer.charsets import WHITESPACE
from bytelex.tokens import Token, TokenKind


class WhitespaceScannerMixin:
    """Mixin providing the whitespace rule.

    Newlines are folded into the same run as spaces and tabs, so
    "\\n " is one WHITESPACE token. Row tracking happens in ``_advance``.

    """

    _pos: int

    def _current_byte(self) -> int:
        """Byte at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> None:
        """Consume one byte. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create token for source[start_pos:pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_whitespace(self) -> Token:
        start = self._pos
        while self._current_byte() in WHITESPACE:
            self._advance()
        return self._make_token(TokenKind.WHITESPACE, start)
