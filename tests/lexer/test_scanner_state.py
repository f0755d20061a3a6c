"""Tests for scanner cursor state and construction paths."""

from __future__ import annotations

from bytelex.lexer import Scanner
from bytelex.tokens import TokenKind


class TestCursorState:
    """Verify position/row/col after scanning."""

    def test_initial_state(self) -> None:
        scanner = Scanner(b"abc")
        assert scanner.position == 0
        assert scanner.row == 1
        assert scanner.col == 1
        assert not scanner.is_exhausted

    def test_position_after_token(self) -> None:
        scanner = Scanner(b"abc def")
        scanner.next_token()
        assert scanner.position == 3
        assert scanner.col == 4

    def test_invalid_jumps_to_end(self) -> None:
        scanner = Scanner(b"a\x01bcdef")
        scanner.next_token()
        token = scanner.next_token()
        assert token.kind is TokenKind.INVALID
        assert scanner.position == len(b"a\x01bcdef")
        assert scanner.is_exhausted
        # The jump does not move the counters
        assert (scanner.row, scanner.col) == (1, 3)

    def test_null_does_not_consume(self) -> None:
        scanner = Scanner(b"")
        scanner.next_token()
        scanner.next_token()
        assert scanner.position == 0
        assert scanner.col == 1

    def test_input_is_copied(self) -> None:
        data = bytearray(b"abc")
        scanner = Scanner(data)
        data[0:3] = b"123"
        assert scanner.source == b"abc"
        assert scanner.next_token().kind is TokenKind.IDENTIFIER

    def test_memoryview_input(self) -> None:
        scanner = Scanner(memoryview(b"42"))
        assert scanner.next_token().value == "42"


class TestConstruction:
    """Alternate constructors produce the same buffer as the byte path."""

    def test_from_args_joins_with_single_space(self) -> None:
        scanner = Scanner.from_args(["1", "+", "2"])
        assert scanner.source == b"1 + 2"

    def test_from_args_empty(self) -> None:
        scanner = Scanner.from_args([])
        assert scanner.source == b""
        assert scanner.next_token().kind is TokenKind.NULL

    def test_from_args_single(self) -> None:
        assert Scanner.from_args(["abc"]).source == b"abc"

    def test_from_args_accepts_iterator(self) -> None:
        assert Scanner.from_args(iter(["a", "b"])).source == b"a b"

    def test_from_args_matches_bytes_path(self) -> None:
        from_args = list(Scanner.from_args(["x", "=", "3.5"]).tokenize())
        from_bytes = list(Scanner(b"x = 3.5").tokenize())
        assert from_args == from_bytes

    def test_from_text_encodes_utf8(self) -> None:
        scanner = Scanner.from_text("aé")
        assert scanner.source == b"a\xc3\xa9"


class TestTokenizeIterator:
    """tokenize() is a lazy consumer loop over next_token()."""

    def test_tokenize_is_lazy(self) -> None:
        scanner = Scanner(b"a b")
        iterator = scanner.tokenize()
        assert scanner.position == 0
        next(iterator)
        assert scanner.position == 1

    def test_tokenize_stops_at_invalid(self) -> None:
        tokens = list(Scanner(b"a\x02b").tokenize())
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.INVALID]

    def test_tokenize_after_termination(self) -> None:
        scanner = Scanner(b"a")
        list(scanner.tokenize())
        assert [t.kind for t in scanner.tokenize()] == [TokenKind.NULL]
