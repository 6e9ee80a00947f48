"""Token dump runner: ``python -m stonelex [FILE]``.

Prints ``=> <text>`` for every token until end of input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from stonelex.config import LexConfig
from stonelex.errors import LexicalError
from stonelex.lexer import Lexer
from stonelex.utils.logger import get_logger

logger = get_logger(__name__)


def run(lexer: Lexer, out: TextIO | None = None) -> int:
    """Print every token's text; return the number of tokens printed."""
    if out is None:
        out = sys.stdout
    count = 0
    for token in lexer.tokenize():
        if token.is_eof:
            break
        print(f"=> {token.text}", file=out)
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stonelex", description="Print the tokens of a source file"
    )
    parser.add_argument("file", nargs="?", help="Source file (default: stdin)")
    parser.add_argument(
        "--int-bits", type=int, default=32, help="Width of integer literals (default: 32)"
    )
    parser.add_argument("--debug", action="store_true", help="Log each tokenized line")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = LexConfig(int_bits=args.int_bits)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.file is None:
            run(Lexer(sys.stdin, source_file="<stdin>", config=config))
        else:
            with open(args.file, encoding="utf-8") as f:
                run(Lexer(f, source_file=args.file, config=config))
    except OSError as e:
        print(f"stonelex: {e}", file=sys.stderr)
        return 1
    except LexicalError as e:
        logger.debug("lexing failed", exc_info=True)
        print(f"stonelex: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
