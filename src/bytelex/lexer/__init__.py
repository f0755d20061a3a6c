"""Pull-based byte scanner for bytelex.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + dispatch + cursor)
├── charsets.py          # Byte classes
└── scanners/            # Multi-byte classification rules
    ├── identifier.py    # Letters and underscore
    ├── number.py        # INT / FLOAT
    └── whitespace.py    # Space, tab, CR, LF, FF runs

Usage:
    >>> from bytelex.lexer import Scanner
    >>> scanner = Scanner(b"abc123")
    >>> scanner.next_token()
    Token(IDENTIFIER, 'abc', 1:4)
    >>> scanner.next_token()
    Token(INT, '123', 1:7)

"""

from bytelex.lexer.core import Scanner

__all__ = ["Scanner"]
