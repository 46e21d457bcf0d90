"""Integer literal scanner mixin."""

from __future__ import annotations

from monkeylex.charsets import is_digit


class NumberScannerMixin:
    """Mixin providing integer scanning.

    Integers are maximal runs of ASCII digits. There is no sign, decimal
    point or exponent; ``1.5`` scans as INT, ILLEGAL, INT.

    """

    _source: str
    _position: int
    _ch: str

    def _read_char(self) -> None:
        """Advance the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _read_number(self) -> str:
        """Consume a digit run starting at the cursor."""
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._source[start : self._position]
