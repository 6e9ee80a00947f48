"""stonelex LexAccumulator: opt-in profiling for lexing.

This module provides accumulated metrics while lexers run:
- Total elapsed time
- Source lines read
- Tokens produced (end-of-line tokens included)

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from stonelex import tokenize
    from stonelex.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokenize("x = 1\\ny = 2")

    print(metrics.summary())
    # {"total_ms": 0.1, "lexers_created": 1, "lines_read": 2, "tokens_produced": 8}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during lexing.

    Attributes:
        start_time: Profiling start timestamp.
        lexers_created: Number of Lexer instances created.
        lines_read: Number of source lines tokenized.
        tokens_produced: Number of tokens queued.

    """

    start_time: float = field(default_factory=perf_counter)
    lexers_created: int = 0
    lines_read: int = 0
    tokens_produced: int = 0

    def record_lexer(self) -> None:
        self.lexers_created += 1

    def record_line(self, token_count: int) -> None:
        """Record one tokenized line.

        Args:
            token_count: Tokens queued for the line, its EOL included.

        """
        self.lines_read += 1
        self.tokens_produced += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lexing metrics.

        Returns:
            Dict with total_ms, lexers_created, lines_read, tokens_produced.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "lexers_created": self.lexers_created,
            "lines_read": self.lines_read,
            "tokens_produced": self.tokens_produced,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled lexing.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator populated by lexers created inside the block.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
