"""Tests ensuring lexer state is consistent across read() and peek().

The lexer moves ACTIVE -> DRAINING -> EXHAUSTED and never back. The
lookahead queue grows a line at a time and only read() shrinks it.
"""

from __future__ import annotations

import io

from stonelex.config import LexConfig, lex_config_context
from stonelex.lexer import Lexer, LexerState
from stonelex.tokens import EOF


class TestStateTransitions:
    """Verify the ACTIVE/DRAINING/EXHAUSTED lifecycle."""

    def test_new_lexer_is_active(self) -> None:
        assert Lexer("a").state == LexerState.ACTIVE

    def test_empty_input_exhausts_on_first_read(self) -> None:
        lexer = Lexer("")

        assert lexer.read() is EOF
        assert lexer.state == LexerState.EXHAUSTED

    def test_stays_active_until_reader_reports_end(self) -> None:
        lexer = Lexer("a")
        lexer.read()
        lexer.read()

        # Both tokens of line 1 consumed, end of input not yet seen
        assert lexer.state == LexerState.ACTIVE
        assert lexer.read() is EOF
        assert lexer.state == LexerState.EXHAUSTED

    def test_lookahead_past_end_drains(self) -> None:
        lexer = Lexer("a\nb")

        assert lexer.peek(10) is EOF
        assert lexer.state == LexerState.DRAINING

        for _ in range(4):
            lexer.read()
        assert lexer.state == LexerState.EXHAUSTED

    def test_exhausted_is_terminal(self) -> None:
        lexer = Lexer("a")
        list(lexer.tokenize())

        for _ in range(3):
            assert lexer.read() is EOF
            assert lexer.peek(0) is EOF
            assert lexer.peek(5) is EOF
        assert lexer.state == LexerState.EXHAUSTED


class TestQueueConsistency:
    """Verify the lookahead queue only shrinks on read()."""

    def test_queue_fills_one_line_at_a_time(self) -> None:
        lexer = Lexer("a b\nc\n")
        lexer.peek(0)

        # "a", "b" and the EOL of line 1; line 2 not read yet
        assert len(lexer._queue) == 3

    def test_peek_does_not_shrink_queue(self) -> None:
        lexer = Lexer("a b c")
        lexer.peek(2)
        size = len(lexer._queue)
        lexer.peek(2)
        lexer.peek(0)

        assert len(lexer._queue) == size

    def test_read_removes_exactly_one(self) -> None:
        lexer = Lexer("a b c")
        lexer.peek(0)
        size = len(lexer._queue)
        lexer.read()

        assert len(lexer._queue) == size - 1

    def test_read_returns_front_of_queue(self) -> None:
        lexer = Lexer("a b c")
        front = lexer.peek(0)

        assert lexer.read() is front


class TestResourceOwnership:
    def test_stream_left_open(self) -> None:
        stream = io.StringIO("a\nb\n")
        lexer = Lexer(stream)
        list(lexer.tokenize())

        assert not stream.closed


class TestConfigSnapshot:
    def test_config_captured_at_construction(self) -> None:
        with lex_config_context(LexConfig(int_bits=64)):
            lexer = Lexer("9000000000")

        assert lexer.read().number == 9_000_000_000

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(int_bits=8)):
            lexer = Lexer("1000", config=LexConfig())

        assert lexer.read().number == 1000
