"""Lexeme scanners for the monkeylex lexer.

Each scanner is a mixin that consumes one kind of multi-character
lexeme starting at the cursor.
"""

from __future__ import annotations

from monkeylex.lexer.scanners.number import NumberScannerMixin
from monkeylex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "NumberScannerMixin",
    "WordScannerMixin",
]
