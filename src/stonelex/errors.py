"""Exception classes for stonelex.

Only LexicalError crosses the lexer's read/peek boundary.
"""

from __future__ import annotations


class StonelexError(Exception):
    """Base exception for all stonelex errors."""

    pass


class LexicalError(StonelexError):
    """Error while turning a source line into tokens.

    Raised when no token matches at the scan position, when a literal is
    out of range, or when the underlying input stream fails.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        line_text: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            line_text: Text of the offending line (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.line_text = line_text

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
