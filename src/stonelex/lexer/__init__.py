"""Line-oriented lexer for stonelex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (queue filling, read/peek)
├── modes.py             # LexerState enum
├── patterns.py          # Token regex, classification, string unescaping
└── reader.py            # LineReader over a text stream

Usage:
    >>> from stonelex.lexer import Lexer
    >>> lexer = Lexer("a 1\\nb")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(IDENTIFIER, 'a', 1:1)
Token(NUMBER, 1, 1:3)
Token(EOL, '\\\\n', 1:4)
Token(IDENTIFIER, 'b', 2:1)
Token(EOL, '\\\\n', 2:2)
Token(EOF, '', -1:0)

"""

from stonelex.lexer.core import Lexer
from stonelex.lexer.modes import LexerState
from stonelex.lexer.reader import LineReader

__all__ = ["Lexer", "LexerState", "LineReader"]
