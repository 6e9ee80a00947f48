"""Line-at-a-time lexer with a lookahead queue.

The lexer pulls one source line at a time, matches it left to right against
TOKEN_PATTERN, and queues the resulting tokens followed by an EOL token.
read() pops from the queue; peek(i) looks ahead without consuming.

Thread Safety:
Lexer instances are single-use and not reentrant. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import io
from collections import deque
from collections.abc import Iterator

from stonelex.config import LexConfig, get_lex_config
from stonelex.errors import LexicalError
from stonelex.lexer.modes import LexerState
from stonelex.lexer.patterns import LexemeKind, classify, match_at, unescape_string
from stonelex.lexer.reader import LineReader, LineSource
from stonelex.profiling import LexAccumulator, get_lex_accumulator
from stonelex.tokens import EOF, EOL_TEXT, Token, TokenType
from stonelex.utils.logger import get_logger

logger = get_logger(__name__)

# Whitespace TOKEN_PATTERN skips before a lexeme
_SPACE = " \t\f\v\r"


class Lexer:
    """Regex-driven lexer with read/peek access.

    Usage:
            >>> lexer = Lexer('x = "hi"\\n')
            >>> while not (tok := lexer.read()).is_eof:
            ...     print(tok)
        Token(IDENTIFIER, 'x', 1:1)
        Token(IDENTIFIER, '=', 1:3)
        Token(STRING, 'hi', 1:5)
        Token(EOL, '\\\\n', 1:9)

    """

    __slots__ = (
        "_reader",
        "_queue",
        "_has_more",
        "_source_file",
        "_config",
        "_accumulator",
    )

    def __init__(
        self,
        source: str | LineSource,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer over a string or a text stream.

        Args:
            source: Source text, or any object with readline()
            source_file: Optional source file path for error messages
            config: Lexer configuration (defaults to the active LexConfig)
        """
        stream = io.StringIO(source) if isinstance(source, str) else source
        self._reader = LineReader(stream, source_file)
        self._queue: deque[Token] = deque()
        self._has_more = True
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._accumulator: LexAccumulator | None = get_lex_accumulator()
        if self._accumulator is not None:
            self._accumulator.record_lexer()

    @property
    def state(self) -> LexerState:
        if self._has_more:
            return LexerState.ACTIVE
        if self._queue:
            return LexerState.DRAINING
        return LexerState.EXHAUSTED

    def read(self) -> Token:
        """Remove and return the next token, or EOF when input is exhausted.

        Raises:
            LexicalError: If the next source line cannot be tokenized.
        """
        if self._fill_queue(0):
            return self._queue.popleft()
        return EOF

    def peek(self, i: int = 0) -> Token:
        """Return the token i places ahead without consuming anything.

        Args:
            i: Lookahead offset (0 is the token read() would return next)

        Returns:
            The token at offset i, or EOF if input ends first.

        Raises:
            ValueError: If i is negative.
            LexicalError: If a source line needed for lookahead is malformed.
        """
        if i < 0:
            raise ValueError(f"peek offset must be non-negative, got {i}")
        if self._fill_queue(i):
            return self._queue[i]
        return EOF

    def tokenize(self) -> Iterator[Token]:
        """Read tokens until input is exhausted.

        Yields:
            Each token in source order, ending with EOF.
        """
        while True:
            token = self.read()
            yield token
            if token is EOF:
                return

    # =========================================================================
    # Queue filling
    # =========================================================================

    def _fill_queue(self, i: int) -> bool:
        """Read lines until at least i + 1 tokens are queued.

        Returns:
            False if input ran out first.
        """
        while i >= len(self._queue):
            if not self._has_more:
                return False
            self._read_line()
        return True

    def _read_line(self) -> None:
        """Tokenize one source line onto the queue, EOL included."""
        result = self._reader.next_line()
        if result is None:
            self._has_more = False
            logger.debug("input exhausted after %d lines", self._reader.lineno)
            return

        line, lineno = result
        queued = len(self._queue)
        pos = 0
        end = len(line)
        while pos < end:
            m = match_at(line, pos)
            if m is None:
                rest = line[pos:].lstrip(_SPACE)
                bad = end - len(rest)
                raise LexicalError(
                    f"bad token {rest[:20]!r}",
                    lineno=lineno,
                    col_offset=bad + 1,
                    source_file=self._source_file,
                    line_text=line,
                )
            self._add_token(lineno, line, m.group("lexeme"), m.start("lexeme"), classify(m))
            pos = m.end()

        self._queue.append(
            Token(TokenType.EOL, EOL_TEXT, lineno, end + 1, self._source_file)
        )
        produced = len(self._queue) - queued
        logger.debug("line %d: %d tokens", lineno, produced)
        if self._accumulator is not None:
            self._accumulator.record_line(produced)

    def _add_token(
        self,
        lineno: int,
        line: str,
        lexeme: str | None,
        start: int,
        kind: LexemeKind | None,
    ) -> None:
        """Classify a matched lexeme and queue its token (comments are dropped)."""
        if lexeme is None or kind is LexemeKind.COMMENT:
            return

        col = start + 1
        limit = self._config.max_literal_length
        if kind is not LexemeKind.OTHER and limit is not None and len(lexeme) > limit:
            raise LexicalError(
                f"literal longer than {limit} characters",
                lineno=lineno,
                col_offset=col,
                source_file=self._source_file,
                line_text=line,
            )

        token_type: TokenType
        value: str | int
        if kind is LexemeKind.NUMBER:
            token_type = TokenType.NUMBER
            digits = lexeme.lstrip("0") or "0"
            # Length check first: int() refuses very long digit strings
            if (
                len(digits) > self._config.max_int_digits
                or (value := int(digits, 10)) > self._config.max_int
            ):
                raise LexicalError(
                    f"integer literal out of range: {lexeme}",
                    lineno=lineno,
                    col_offset=col,
                    source_file=self._source_file,
                    line_text=line,
                )
        elif kind is LexemeKind.STRING:
            token_type = TokenType.STRING
            value = unescape_string(lexeme)
        else:
            token_type = TokenType.IDENTIFIER
            value = lexeme
        self._queue.append(Token(token_type, value, lineno, col, self._source_file))
