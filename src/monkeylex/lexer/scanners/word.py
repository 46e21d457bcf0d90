"""Identifier and keyword scanner mixin."""

from __future__ import annotations

from monkeylex.charsets import is_letter


class WordScannerMixin:
    """Mixin providing identifier scanning.

    Words are maximal runs of ASCII letters and underscores. Digits end a
    word, so ``x1`` scans as IDENT ``x`` followed by INT ``1``. Keyword
    classification happens after the whole run is known.

    """

    # These will be set by the Lexer class
    _source: str
    _position: int
    _ch: str

    def _read_char(self) -> None:
        """Advance the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _read_identifier(self) -> str:
        """Consume a letter/underscore run starting at the cursor.

        Returns:
            The run's text. The cursor is left on the first character
            after it.
        """
        start = self._position
        while is_letter(self._ch):
            self._read_char()
        return self._source[start : self._position]
