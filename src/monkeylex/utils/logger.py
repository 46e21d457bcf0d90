"""Minimal logging utilities for monkeylex.

Example:
    >>> from monkeylex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "monkeylex." prefix.
    No handlers are attached; applications configure logging themselves.

    Example:
        >>> get_logger("repl").name
        'monkeylex.repl'
    """
    if not (name == "monkeylex" or name.startswith("monkeylex.")):
        name = f"monkeylex.{name}"
    return logging.getLogger(name)
