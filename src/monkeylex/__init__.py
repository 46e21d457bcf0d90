"""
monkeylex — Scanner for the Monkey programming language

Turns source text into a flat stream of classified tokens: identifiers,
keywords, integers, single-character operators and delimiters. The
scanner is total over any input and never raises; unrecognized
characters come back as ILLEGAL tokens.

Quick Start:
    >>> from monkeylex import tokenize
    >>> [t.type.name for t in tokenize("let x = 5;")]
    ['LET', 'IDENT', 'ASSIGN', 'INT', 'SEMICOLON', 'EOF']

    >>> # Pull tokens one at a time
    >>> from monkeylex import Lexer
    >>> lexer = Lexer("fn")
    >>> lexer.next_token()
    Token(FUNCTION, 'fn', 1:1)

Installation:
    pip install monkeylex              # zero runtime deps
"""

from monkeylex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from monkeylex.errors import IllegalCharacterError, MonkeyLexError
from monkeylex.lexer import Lexer
from monkeylex.location import SourceLocation
from monkeylex.tokens import KEYWORDS, Token, TokenType, keyword_lookup, lookup_ident

__version__ = "0.1.0"


def tokenize(
    source: str | bytes,
    *,
    source_file: str | None = None,
    strict: bool | None = None,
) -> list[Token]:
    """Scan a whole input into a list of tokens ending with EOF.

    Args:
        source: Program text (str, or bytes decoded as Latin-1)
        source_file: Optional source file path for locations and errors
        strict: Raise on the first ILLEGAL token. Defaults to the active
            LexConfig's ``strict`` setting.

    Returns:
        Tokens in source order; the last one is always EOF.

    Raises:
        IllegalCharacterError: In strict mode, for the first character
            outside the vocabulary.

    Example:
        >>> [t.type.name for t in tokenize("1a")]
        ['INT', 'IDENT', 'EOF']
    """
    if strict is None:
        strict = get_lex_config().strict

    tokens: list[Token] = []
    for token in Lexer(source, source_file=source_file).tokenize():
        if strict and token.type is TokenType.ILLEGAL:
            raise IllegalCharacterError(
                token.literal,
                lineno=token.lineno,
                col_offset=token.col,
                source_file=source_file,
            )
        tokens.append(token)
    return tokens


__all__ = [
    # Core API
    "tokenize",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "keyword_lookup",
    "lookup_ident",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "MonkeyLexError",
    "IllegalCharacterError",
]
