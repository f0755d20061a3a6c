"""Identifier scanner mixin."""

from bytelex.lexer.charsets import IDENTIFIER_BYTES
from bytelex.tokens import Token, TokenKind


class IdentifierScannerMixin:
    """Mixin providing the identifier rule: a maximal run of letters/underscores."""

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

    def _scan_identifier(self) -> Token:
        start = self._pos
        while self._current_byte() in IDENTIFIER_BYTES:
            self._advance()
        return self._make_token(TokenKind.IDENTIFIER, start)
