"""ContextVar-based lexer configuration for stonelex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from stonelex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(int_bits=64)):
        tokens = tokenize("9000000000")

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: source_file is intentionally excluded. It is per-input state,
    not configuration, and stays on the Lexer instance.

    Attributes:
        int_bits: Width of the signed integer type number literals decode
            into. Literals above 2**(int_bits - 1) - 1 are rejected.
        max_literal_length: Longest accepted number or string lexeme
            (None for no limit)

    """

    int_bits: int = 32
    max_literal_length: int | None = None

    def __post_init__(self) -> None:
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")
        if self.max_literal_length is not None and self.max_literal_length < 1:
            raise ValueError(
                f"max_literal_length must be positive, got {self.max_literal_length}"
            )

    @property
    def max_int(self) -> int:
        """Largest value a number literal may decode to."""
        return (1 << (self.int_bits - 1)) - 1

    @property
    def max_int_digits(self) -> int:
        """Number of decimal digits in max_int."""
        return len(str(self.max_int))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"int_bits": 64, "colour": "red"}).int_bits
            64

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
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(int_bits=64)):
        ...     lexer = Lexer("9000000000")
        >>> # Automatically reset to previous config

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
