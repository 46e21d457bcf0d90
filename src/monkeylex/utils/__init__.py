"""Utility modules for monkeylex.

Provides:
- logger: get_logger for logging
"""

from monkeylex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
