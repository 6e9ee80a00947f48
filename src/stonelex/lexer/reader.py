"""Line-numbered reader over a text stream."""

from __future__ import annotations

from typing import Protocol

from stonelex.errors import LexicalError


class LineSource(Protocol):
    """Anything that can hand out one line at a time ("" at end)."""

    def readline(self) -> str: ...


class LineReader:
    """Deliver one line at a time with its 1-indexed line number.

    Line terminators (\\n, \\r\\n, \\r) are stripped. The reader never
    closes the stream; whoever opened it does.

    """

    __slots__ = ("_stream", "_lineno", "_source_file")

    def __init__(self, stream: LineSource, source_file: str | None = None) -> None:
        self._stream = stream
        self._lineno = 0
        self._source_file = source_file

    @property
    def lineno(self) -> int:
        """Number of lines delivered so far."""
        return self._lineno

    def next_line(self) -> tuple[str, int] | None:
        """Read the next line.

        Returns:
            (text, lineno) with the terminator stripped, or None at end of input.

        Raises:
            LexicalError: If the stream fails while reading.
        """
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise LexicalError(
                f"cannot read input: {e}",
                lineno=self._lineno + 1,
                source_file=self._source_file,
            ) from e
        if not line:
            return None
        if line.endswith("\r\n"):
            line = line[:-2]
        elif line.endswith(("\n", "\r")):
            line = line[:-1]
        self._lineno += 1
        return line, self._lineno
