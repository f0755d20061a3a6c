"""Source location tracking for diagnostics.

Provides SourceLocation, the rich form of a token's ``(row, col)`` pair.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Scanner position for error messages and debugging.

    Both counters are 1-indexed. ``col`` is the cumulative number of
    bytes consumed plus one; it is not reset at line breaks, so after the
    first newline it is not a column within the current line.

    Attributes:
        row: Line counter (1-indexed)
        col: Consumed-byte counter (1-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(row=3, col=12)
            >>> str(loc)
            '3:12'

            >>> str(SourceLocation(1, 4, "input.txt"))
            'input.txt:1:4'

    """

    row: int
    col: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.row}:{self.col}"
        return f"{self.row}:{self.col}"

    def as_tuple(self) -> tuple[int, int]:
        """Return the bare ``(row, col)`` pair."""
        return (self.row, self.col)

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for tokens created outside a scan (see ``Token.empty()``).
        """
        return cls(row=0, col=0)
