"""Token and TokenType definitions for the stonelex lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token has a type, a value, and the line it was read from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stonelex.location import SourceLocation

# Text carried by every end-of-line token
EOL_TEXT = "\\n"

# Line number carried by the shared end-of-file sentinel
EOF_LINENO = -1


class TokenType(Enum):
    """Token kinds produced by the lexer.

    The set is closed: significant lexemes become IDENTIFIER, NUMBER or
    STRING; every source line ends with one EOL; exhausted input yields EOF.

    """

    IDENTIFIER = auto()  # names, operators, punctuation
    NUMBER = auto()  # 123
    STRING = auto()  # "text"
    EOL = auto()  # end of a source line
    EOF = auto()  # end of input


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token kind (from TokenType enum)
        value: int for NUMBER, unescaped text for STRING, raw text for
            IDENTIFIER, EOL_TEXT for EOL, "" for EOF
        lineno: Source line number (1-indexed; EOF_LINENO for EOF)
        col: Column of the lexeme start (1-indexed; 0 for EOF)
        source_file: Optional source file path

    """

    type: TokenType
    value: str | int
    lineno: int
    col: int = 0
    source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def is_number(self) -> bool:
        return self.type is TokenType.NUMBER

    @property
    def is_identifier(self) -> bool:
        return self.type is TokenType.IDENTIFIER

    @property
    def is_string(self) -> bool:
        return self.type is TokenType.STRING

    @property
    def is_eol(self) -> bool:
        return self.type is TokenType.EOL

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    @property
    def text(self) -> str:
        """Token text: decimal rendering for numbers, content otherwise."""
        return str(self.value)

    @property
    def number(self) -> int:
        """Integer value of a NUMBER token.

        Raises:
            TypeError: If the token is not a NUMBER.
        """
        if self.type is not TokenType.NUMBER:
            raise TypeError(f"{self.type.name} token has no numeric value")
        return self.value  # type: ignore[return-value]

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from stonelex.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"


# Shared end-of-file sentinel returned once input is exhausted
EOF = Token(type=TokenType.EOF, value="", lineno=EOF_LINENO, col=0)
