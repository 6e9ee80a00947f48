"""
stonelex: Line-oriented lexer for Stone-style source code

Turns source text into identifiers, integer literals, string literals and
one end-of-line token per source line, with lookahead for a hand-written
parser. Zero runtime dependencies.

Quick Start:
    >>> from stonelex import Lexer
    >>> lexer = Lexer('print "hi" // greet')
    >>> lexer.peek(1).text
    'hi'
    >>> lexer.read().text
    'print'

    >>> from stonelex import tokenize
    >>> [t.text for t in tokenize("x == 10")]
    ['x', '==', '10', '\\\\n', '']
"""

from __future__ import annotations

from stonelex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from stonelex.errors import LexicalError, StonelexError
from stonelex.lexer import Lexer, LexerState, LineReader
from stonelex.location import SourceLocation
from stonelex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from stonelex.tokens import EOF, EOL_TEXT, Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize a whole source string.

    Args:
        source: Source text
        source_file: Optional source file path for error messages

    Returns:
        Every token in source order, ending with EOF.

    Raises:
        LexicalError: If any line cannot be tokenized.
    """
    return list(Lexer(source, source_file=source_file).tokenize())


__all__ = [
    "EOF",
    "EOL_TEXT",
    "LexAccumulator",
    "LexConfig",
    "Lexer",
    "LexerState",
    "LexicalError",
    "LineReader",
    "SourceLocation",
    "StonelexError",
    "Token",
    "TokenType",
    "__version__",
    "get_lex_accumulator",
    "get_lex_config",
    "lex_config_context",
    "profiled_lex",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
