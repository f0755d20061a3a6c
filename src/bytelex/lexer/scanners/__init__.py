"""Classification rule scanners for the bytelex scanner.

Each scanner is a mixin that consumes one multi-byte token kind.
Single-byte rules (punctuation, invalid) live in the dispatcher.
"""

from __future__ import annotations

from bytelex.lexer.scanners.identifier import IdentifierScannerMixin
from bytelex.lexer.scanners.number import NumberScannerMixin
from bytelex.lexer.scanners.whitespace import WhitespaceScannerMixin

__all__ = [
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "WhitespaceScannerMixin",
]
