"""Token pattern, lexeme classification and string literal unescaping.

One compiled alternation recognises, at the scan position and in priority
order: leading whitespace, a // comment, an integer, a string literal, an
identifier, a two-character operator, or one punctuation character. Named
groups tag which alternative fired.

The string alternative and unescape_string() implement the same escape
grammar and must be changed together.
"""

from __future__ import annotations

import re
import string
from enum import Enum, auto

# Java's \p{Punct} minus the double quote, so that an unterminated string
# fails instead of lexing as '"' followed by an identifier.
PUNCTUATION = "".join(c for c in string.punctuation if c != '"')

OPERATORS = ("==", "<=", ">=", "&&", "||")

TOKEN_PATTERN = re.compile(
    r"[ \t\f\v\r]*"
    r"(?P<lexeme>"
    r"(?P<comment>//.*)"
    r"|(?P<number>[0-9]+)"
    r'|(?P<string>"(?:\\"|\\\\|\\n|[^"])*+")'
    r"|[A-Z_a-z][A-Z_a-z0-9]*"
    r"|" + "|".join(re.escape(op) for op in OPERATORS) +
    r"|[" + re.escape(PUNCTUATION) + r"]"
    r")?"
)


class LexemeKind(Enum):
    """Which alternative of TOKEN_PATTERN produced the lexeme."""

    COMMENT = auto()
    NUMBER = auto()
    STRING = auto()
    OTHER = auto()  # identifier, operator or punctuation


def match_at(line: str, pos: int) -> re.Match[str] | None:
    """Match TOKEN_PATTERN anchored at pos.

    Returns None when nothing matches or when the match would not advance
    (a character no alternative accepts sits at the scan position).
    """
    m = TOKEN_PATTERN.match(line, pos)
    if m is None or m.end() == pos:
        return None
    return m


def classify(m: re.Match[str]) -> LexemeKind | None:
    """Classify a match; None means it was whitespace only."""
    if m.group("lexeme") is None:
        return None
    if m.group("comment") is not None:
        return LexemeKind.COMMENT
    if m.group("number") is not None:
        return LexemeKind.NUMBER
    if m.group("string") is not None:
        return LexemeKind.STRING
    return LexemeKind.OTHER


def unescape_string(literal: str) -> str:
    """Decode a matched string literal, quotes included.

    \\" and \\\\ yield the escaped character, \\n yields a newline, and
    anything else (a trailing lone backslash included) is copied verbatim.

    Example:
        >>> unescape_string('"a\\\\"b"')
        'a"b'
    """
    out: list[str] = []
    end = len(literal) - 1
    i = 1
    while i < end:
        c = literal[i]
        if c == "\\" and i + 1 < end:
            nxt = literal[i + 1]
            if nxt == '"' or nxt == "\\":
                c = nxt
                i += 1
            elif nxt == "n":
                c = "\n"
                i += 1
        out.append(c)
        i += 1
    return "".join(out)
