"""Read-scan-print loop for interactive use.

Each input line is scanned on its own and its tokens are written one per
line, without the trailing EOF.

A session looks like:

    >> let x;
    {Type:LET Literal:let}
    {Type:IDENT Literal:x}
    {Type:; Literal:;}
    >>
"""

from __future__ import annotations

import sys
from typing import TextIO

from monkeylex import tokenize
from monkeylex.config import LexConfig, get_lex_config
from monkeylex.errors import IllegalCharacterError
from monkeylex.tokens import Token, TokenType
from monkeylex.utils.logger import get_logger

logger = get_logger(__name__)


def write_tokens(tokens: list[Token], out_stream: TextIO) -> None:
    """Write each non-EOF token on its own line."""
    for token in tokens:
        if token.type is TokenType.EOF:
            break
        out_stream.write(f"{token}\n")


def start(
    in_stream: TextIO,
    out_stream: TextIO,
    *,
    err_stream: TextIO | None = None,
    config: LexConfig | None = None,
) -> int:
    """Run the loop until ``in_stream`` is exhausted.

    Args:
        in_stream: Source of input lines
        out_stream: Destination for prompts and tokens
        err_stream: Destination for strict-mode errors (stderr if None)
        config: Overrides the active LexConfig. In strict mode a line
            containing an illegal character reports the error instead of
            printing its tokens, and the loop moves on to the next line.

    Returns:
        Number of lines rejected in strict mode.
    """
    config = config or get_lex_config()
    err_stream = err_stream or sys.stderr
    logger.debug("repl started (strict=%s)", config.strict)

    lines = 0
    errors = 0
    while True:
        out_stream.write(config.prompt)
        out_stream.flush()

        line = in_stream.readline()
        if not line:
            break
        lines += 1

        try:
            tokens = tokenize(line, strict=config.strict)
        except IllegalCharacterError as e:
            errors += 1
            err_stream.write(f"ERROR: {e}\n")
            continue
        write_tokens(tokens, out_stream)

    logger.debug("repl finished after %d lines (%d errors)", lines, errors)
    return errors
