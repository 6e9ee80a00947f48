"""Lexer lifecycle states."""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Lexer lifecycle states.

    - ACTIVE: Source lines remain to be read
    - DRAINING: Input exhausted, queued tokens remain
    - EXHAUSTED: Nothing left; read() and peek() return EOF (terminal)

    """

    ACTIVE = auto()
    DRAINING = auto()
    EXHAUSTED = auto()
