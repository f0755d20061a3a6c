"""Tests for the top-level convenience API."""

from bytelex import Scanner, Token, TokenKind, tokenize


class TestTokenize:
    def test_returns_full_stream(self) -> None:
        tokens = tokenize(b"abc123")
        assert tokens == [
            Token(TokenKind.IDENTIFIER, "abc", (1, 4)),
            Token(TokenKind.INT, "123", (1, 7)),
            Token(TokenKind.NULL, "", (1, 7)),
        ]

    def test_empty(self) -> None:
        assert tokenize(b"") == [Token(TokenKind.NULL, "", (1, 1))]

    def test_matches_manual_loop(self) -> None:
        source = b"let x = 42;\nx.y(1.5)"
        scanner = Scanner(source)
        manual = []
        while True:
            token = scanner.next_token()
            manual.append(token)
            if token.kind in (TokenKind.NULL, TokenKind.INVALID):
                break
        assert tokenize(source) == manual

    def test_source_file_label(self) -> None:
        tokens = tokenize(b"a", source_file="doc.txt")
        assert str(tokens[0].location) == "doc.txt:1:2"
