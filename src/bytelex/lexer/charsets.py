"""Byte classes for O(1) classification.

All sets are frozensets of byte values (ints), since indexing ``bytes``
yields ints. Only ASCII bytes are ever classified; every other byte
falls through to INVALID.

Usage:
    from bytelex.lexer.charsets import DIGITS

    if byte in DIGITS:  # O(1) lookup
        ...
"""

import string

# Identifier bytes: letters and underscore. Digits never continue an
# identifier, so "abc123" is IDENTIFIER "abc" then INT "123".
IDENTIFIER_BYTES: frozenset[int] = frozenset((string.ascii_letters + "_").encode("ascii"))

DIGITS: frozenset[int] = frozenset(string.digits.encode("ascii"))

# The 32 ASCII punctuation characters. "_" is in this class too but is
# claimed by IDENTIFIER_BYTES first.
PUNCTUATION: frozenset[int] = frozenset(string.punctuation.encode("ascii"))

# Space, tab, LF, FF, CR. Vertical tab (0x0B) is deliberately absent.
WHITESPACE: frozenset[int] = frozenset(b" \t\n\x0c\r")

DOT: int = ord(".")
NEWLINE: int = ord("\n")

# Returned by byte accessors past the end of input; matches no class.
NO_BYTE: int = -1
