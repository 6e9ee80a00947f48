"""Tests for stonelex utility modules."""

import logging

import pytest

from stonelex import tokenize
from stonelex.errors import LexicalError


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from stonelex.utils.logger import get_logger

        assert get_logger("mymodule").name == "stonelex.mymodule"

    def test_keeps_package_names(self) -> None:
        from stonelex.utils.logger import get_logger

        assert get_logger("stonelex").name == "stonelex"
        assert get_logger("stonelex.lexer.core").name == "stonelex.lexer.core"

    def test_exported_from_utils(self) -> None:
        from stonelex.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)


class TestLexerLogging:
    """The lexer logs tokenized lines at DEBUG."""

    def test_logs_each_line(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="stonelex")
        tokenize("a b\nc")

        messages = [r.getMessage() for r in caplog.records if r.name == "stonelex.lexer.core"]
        assert messages == [
            "line 1: 3 tokens",
            "line 2: 2 tokens",
            "input exhausted after 2 lines",
        ]

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="stonelex")
        tokenize("a b\nc")

        assert caplog.records == []

    def test_failed_line_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="stonelex")
        with pytest.raises(LexicalError):
            tokenize('"oops')

        assert caplog.records == []
