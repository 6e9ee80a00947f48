"""Tests for stonelex.profiling, the lexing profiling API."""

from stonelex import Lexer, tokenize
from stonelex.profiling import (
    LexAccumulator,
    get_lex_accumulator,
    profiled_lex,
)


class TestGetLexAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_lex_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_lex():
            pass
        assert get_lex_accumulator() is None


class TestProfiledLex:
    def test_yields_accumulator(self) -> None:
        with profiled_lex() as acc:
            assert isinstance(acc, LexAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_lex() as acc:
            assert get_lex_accumulator() is acc

    def test_records_lines_and_tokens(self) -> None:
        with profiled_lex() as acc:
            tokenize("x = 1\ny")
        assert acc.lexers_created == 1
        assert acc.lines_read == 2
        # x = 1 EOL / y EOL
        assert acc.tokens_produced == 6

    def test_records_multiple_lexers(self) -> None:
        with profiled_lex() as acc:
            tokenize("a")
            tokenize("b")
            tokenize("c")
        assert acc.lexers_created == 3
        assert acc.lines_read == 3

    def test_counts_only_lines_actually_read(self) -> None:
        with profiled_lex() as acc:
            Lexer("a\nb\nc").peek(0)
        assert acc.lines_read == 1

    def test_lexer_outside_context_not_recorded(self) -> None:
        lexer = Lexer("a\nb")
        with profiled_lex() as acc:
            list(lexer.tokenize())
        assert acc.lexers_created == 0
        assert acc.lines_read == 0

    def test_total_duration_positive(self) -> None:
        with profiled_lex() as acc:
            tokenize("x = 1")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = LexAccumulator().summary()
        assert summary["lexers_created"] == 0
        assert summary["lines_read"] == 0
        assert summary["tokens_produced"] == 0

    def test_summary_after_lex(self) -> None:
        with profiled_lex() as acc:
            tokenize("a b\n\n")
        summary = acc.summary()
        assert summary["lines_read"] == 2
        assert summary["tokens_produced"] == 4
        assert "total_ms" in summary
