"""Token and TokenType definitions for the monkeylex scanner.

The lexer produces a stream of Token objects that a parser consumes.
Each Token has a type, the literal text it was scanned from, and a
source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable). The keyword table is a
read-only mapping built once at import.

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their location read.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Values are the symbolic tags of the vocabulary; operators and
    delimiters use the character they stand for.

    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"  # add, foobar, x, y
    INT = "INT"  # 1343456

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"

    @property
    def is_keyword(self) -> bool:
        """True for tags reachable through the keyword table."""
        return self in _KEYWORD_TYPES

    def __str__(self) -> str:
        return self.value


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
    }
)

_KEYWORD_TYPES: frozenset[TokenType] = frozenset(KEYWORDS.values())


def keyword_lookup(ident: str) -> TokenType | None:
    """Return the keyword tag for ``ident``, or None if it is not a keyword."""
    return KEYWORDS.get(ident)


def lookup_ident(ident: str) -> TokenType:
    """Classify a scanned word as a keyword or a plain identifier.

    Args:
        ident: The full letter/underscore run

    Returns:
        The keyword's TokenType, or TokenType.IDENT.

    Example:
        >>> lookup_ident("let")
        <TokenType.LET: 'LET'>
        >>> lookup_ident("lett")
        <TokenType.IDENT: 'IDENT'>
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Equality and hashing only look at ``type`` and ``literal``, so tokens
    built by hand compare equal to scanned ones regardless of position.

    Attributes:
        type: The token type (from TokenType enum)
        literal: The exact source text of the lexeme ("" for EOF)
        _offset: Absolute start position in source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _source_file: Optional source file path

    """

    type: TokenType
    literal: str
    _offset: int = field(default=0, compare=False)
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from monkeylex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._offset + len(self.literal),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.literal!r}, {self._lineno}:{self._col})"

    def __str__(self) -> str:
        return f"{{Type:{self.type} Literal:{self.literal}}}"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
