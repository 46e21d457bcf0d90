"""Pull-based scanner for the Monkey language.

Each call to ``next_token`` skips whitespace, classifies the character
under the cursor, and consumes exactly one lexeme. Multi-character
lexemes (identifiers, keywords, integers) are scanned with maximal
munch by the scanner mixins; everything else is a single character.

The scanner is total: every input, including empty input and arbitrary
bytes, produces a token stream ending in EOF. Characters outside the
vocabulary become ILLEGAL tokens and scanning continues.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from monkeylex.charsets import EOF_CHAR, SYMBOLS, WHITESPACE, is_digit, is_letter
from monkeylex.lexer.scanners import NumberScannerMixin, WordScannerMixin
from monkeylex.tokens import Token, TokenType, lookup_ident
from monkeylex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    WordScannerMixin,
    NumberScannerMixin,
):
    """Scanner producing one token per ``next_token`` call.

    Cursor state:
        _position: index of the character under examination
        _read_position: index of the next character to read
            (always ``_position + 1`` once primed)
        _ch: character at ``_position``, or ``""`` past the end

    Usage:
            >>> lexer = Lexer("let five = 5;")
            >>> for token in lexer.tokenize():
            ...     print(token)
        {Type:LET Literal:let}
        {Type:IDENT Literal:five}
        {Type:= Literal:=}
        {Type:INT Literal:5}
        {Type:; Literal:;}
        {Type:EOF Literal:}

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_source_file",
        "_position",
        "_read_position",
        "_ch",
        "_lineno",
        "_col",
        "_saved_position",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str | bytes,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer and prime the cursor on the first character.

        Args:
            source: Program text. Bytes are decoded as Latin-1 so that
                every byte maps to exactly one character.
            source_file: Optional source file path for locations
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("latin-1")
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file

        self._position = 0
        self._read_position = 0
        self._ch = EOF_CHAR
        self._lineno = 1
        self._col = 0

        self._saved_position = 0
        self._saved_lineno = 1
        self._saved_col = 1

        self._read_char()

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once the input is exhausted every call returns EOF.

        Returns:
            The next Token in source order.
        """
        self._skip_whitespace()
        self._save_location()

        ch = self._ch
        token_type = SYMBOLS.get(ch)
        if token_type is not None:
            token = self._make_token(token_type, ch)
            self._read_char()
            return token

        if is_letter(ch):
            literal = self._read_identifier()
            return self._make_token(lookup_ident(literal), literal)

        if is_digit(ch):
            return self._make_token(TokenType.INT, self._read_number())

        if ch == EOF_CHAR:
            return self._make_token(TokenType.EOF, "")

        token = self._make_token(TokenType.ILLEGAL, ch)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("illegal character %r at %s", ch, token.location)
        self._read_char()
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Cursor
    # =========================================================================

    def _read_char(self) -> None:
        """Advance the cursor one character.

        Past the end of input the cursor stays on the sentinel.
        """
        if self._read_position > self._source_len:
            return

        if self._ch == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        if self._read_position >= self._source_len:
            self._ch = EOF_CHAR
        else:
            self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _skip_whitespace(self) -> None:
        """Advance past spaces, tabs, newlines and carriage returns."""
        while self._ch in WHITESPACE:
            self._read_char()

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save the cursor location where the next lexeme starts."""
        self._saved_position = self._position
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, literal: str) -> Token:
        """Create a Token at the saved location."""
        return Token(
            type=token_type,
            literal=literal,
            _offset=self._saved_position,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _source_file=self._source_file,
        )
