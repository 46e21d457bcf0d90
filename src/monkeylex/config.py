"""ContextVar-based lexing configuration for monkeylex.

Config is read by ``monkeylex.tokenize`` and the REPL. The scanner core
(``Lexer.next_token``) does not consult it: it is total and behaves the
same under every configuration.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from monkeylex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict=True)):
        tokens = tokenize(source)  # raises IllegalCharacterError on "@"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        strict: Raise IllegalCharacterError on the first ILLEGAL token
            instead of returning it as data
        prompt: Prompt written by the REPL before each line

    """

    strict: bool = False
    prompt: str = ">> "

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"strict": True, "colour": "red"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(strict=True)):
        ...     get_lex_config().strict
        True
        >>> get_lex_config().strict
        False

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
