"""Token and TokenKind definitions for the bytelex scanner.

The scanner produces a stream of Token objects, one per ``next_token()``
call. Each Token has a kind, the decoded text it consumed, and the
scanner position recorded after the token's bytes were consumed.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores the raw ``(row, col)`` pair and lazily creates a
SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bytelex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    The value of each member is its display name, as used by
    ``str(token)`` and ``Token.format_kind()``.

    """

    # Layout
    WHITESPACE = "Whitespace"

    # Terminal markers
    INVALID = "Invalid"
    NULL = "Null"

    # Literals
    INT = "Int"
    FLOAT = "Float"

    # Names and single-character punctuation
    IDENTIFIER = "Identifier"
    PONCT = "Ponct"

    # Reserved for operator tokens; never produced by the scanner
    OP = "Op"

    @property
    def label(self) -> str:
        """Display name of the kind (e.g. ``"Identifier"``)."""
        return self.value

    @property
    def is_terminal(self) -> bool:
        """True for the kinds that end productive scanning."""
        return self is TokenKind.NULL or self is TokenKind.INVALID


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: Text consumed for this token, decoded from UTF-8 with
            invalid sequences replaced by U+FFFD. Empty for NULL.
        loc: ``(row, col)`` of the scanner *after* the token was consumed
        _source_file: Optional source file path for ``location``

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    value: str
    loc: tuple[int, int]
    _source_file: str | None = field(default=None, repr=False, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def empty(cls) -> Token:
        """Placeholder NULL token at ``(0, 0)``, before any scan happened."""
        return cls(TokenKind.NULL, "", (0, 0))

    def __str__(self) -> str:
        return f"{self.format_location()} {self.format_kind()} -> {self.value}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.loc[0]}:{self.loc[1]})"

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        from bytelex.location import SourceLocation

        loc = SourceLocation(row=self.loc[0], col=self.loc[1], source_file=self._source_file)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def row(self) -> int:
        """Line counter (convenience accessor)."""
        return self.loc[0]

    @property
    def col(self) -> int:
        """Column counter (convenience accessor)."""
        return self.loc[1]

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal

    def format_location(self) -> str:
        """Location as ``"row:col"``."""
        return f"{self.loc[0]}:{self.loc[1]}"

    def format_kind(self) -> str:
        """Kind display name, e.g. ``"Ponct"``."""
        return self.kind.label

    def format_value(self) -> str:
        """Raw token text."""
        return self.value
