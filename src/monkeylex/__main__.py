"""Command line entry point: ``python -m monkeylex``.

Without arguments, starts the REPL on stdin/stdout. With ``--file`` the
tokens of that file are printed instead.

Exit codes:
  0 = success
  1 = illegal character in strict mode, or unreadable file
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from monkeylex import __version__, tokenize
from monkeylex.config import LexConfig
from monkeylex.errors import IllegalCharacterError
from monkeylex.repl import start, write_tokens


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="monkeylex",
        description="Print the tokens of Monkey source code.",
    )
    ap.add_argument("-f", "--file", type=Path, help="Scan this file instead of starting the REPL")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Treat characters outside the vocabulary as errors",
    )
    ap.add_argument("--prompt", default=LexConfig().prompt, help="REPL prompt")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = ap.parse_args(argv)

    config = LexConfig(strict=args.strict, prompt=args.prompt)

    if args.file is None:
        errors = start(sys.stdin, sys.stdout, err_stream=sys.stderr, config=config)
        return 1 if errors else 0

    try:
        source = args.file.read_bytes()
        tokens = tokenize(source, source_file=str(args.file), strict=config.strict)
    except (OSError, IllegalCharacterError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    write_tokens(tokens, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
