"""Exception classes for monkeylex.

The scanner itself never raises: unrecognized characters become ILLEGAL
tokens. These exceptions are used by callers that opt into strict
scanning (see ``monkeylex.tokenize``).
"""

from __future__ import annotations


class MonkeyLexError(Exception):
    """Base exception for all monkeylex errors."""

    pass


class IllegalCharacterError(MonkeyLexError):
    """A character that is not part of the token vocabulary.

    Raised by strict tokenization on the first ILLEGAL token.
    """

    def __init__(
        self,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with the offending character and its location.

        Args:
            char: The character that could not be classified
            lineno: Line number where it occurred (1-indexed)
            col_offset: Column offset where it occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.char = char
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}illegal character {char!r}")
