"""Scanner for the Monkey language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor, whitespace, dispatch)
└── scanners/            # Multi-character lexeme scanners
    ├── word.py          # Identifiers and keywords
    └── number.py        # Integer literals

Usage:
    >>> from monkeylex.lexer import Lexer
    >>> lexer = Lexer("fn(x)")
    >>> [t.literal for t in lexer.tokenize()]
    ['fn', '(', 'x', ')', '']

"""

from monkeylex.lexer.core import Lexer

__all__ = ["Lexer"]
