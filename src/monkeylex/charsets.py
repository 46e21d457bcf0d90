"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII is recognized. Anything outside these sets that is not the
end-of-input sentinel scans as ILLEGAL.

Usage:
    from monkeylex.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

from types import MappingProxyType

from monkeylex.tokens import TokenType

# End-of-input sentinel returned by the cursor once the source is exhausted
EOF_CHAR = ""

# Skipped between lexemes
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

DIGITS: frozenset[str] = frozenset("0123456789")

# Identifier characters: ASCII letters and underscore, no digits
LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

# Single-character operators and delimiters
SYMBOLS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "=": TokenType.ASSIGN,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "!": TokenType.BANG,
        "/": TokenType.SLASH,
        "*": TokenType.ASTERISK,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }
)


def is_letter(char: str) -> bool:
    """Check if character may start or continue an identifier."""
    return char in LETTERS


def is_digit(char: str) -> bool:
    """Check if character is an ASCII digit (0-9)."""
    return char in DIGITS
