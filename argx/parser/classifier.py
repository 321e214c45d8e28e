# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for argx.

`classify()` performs a single left-to-right scan over raw command-line tokens
and sorts each one into positional arguments, options or flags:

    classify(["in.txt", "-o", "out.txt", "-v", "--force"])
    → args=("in.txt",), options={"o": ("out.txt",), "v": ()}, flags=("force",)

Rules:
- `-name` opens an option. The next bare token, if any, becomes its value.
- `--name` (two or more dashes) records a flag. Flags never take values.
- A bare token is a value when an option is pending, otherwise positional.
- Repeated options accumulate their values in encounter order.
- An option followed by another option, a flag or the end of input is kept
  with no values.
- Tokens made only of dashes (`-`, `--`) are ignored.

`parse()` is the process entry point: it reads `sys.argv` when no tokens are
given and leaves out the program name unless asked not to.
"""
from __future__ import annotations

import sys
from typing import Iterable, Sequence

from argx.logger import logger
from argx.parser.builder import ParseResultBuilder
from argx.parser.parse_result import ParseResult
from argx.parser.token import TokenKind, read_token


def classify(tokens: Iterable[str]) -> ParseResult:
    """
    Classify every token of `tokens` in a single pass.

    Args:
        tokens (Iterable[str]): Raw tokens, already split by the shell or runtime.

    Returns:
        ParseResult: The classified arguments, options and flags.

    Raises:
        TypeError: If a token is not a string.
    """
    builder = ParseResultBuilder()
    pending: str | None = None
    inert = 0

    for token in tokens:
        kind, name = read_token(token)
        if kind is TokenKind.BARE:
            if pending is not None:
                builder.option(pending, token)
                pending = None
            else:
                builder.arg(token)
        elif kind is TokenKind.INERT:
            inert += 1
        elif kind is TokenKind.OPTION:
            builder.option(name)
            pending = name
        else:
            pending = None
            builder.flag(name)

    result = builder.build()
    logger.debug("Classified tokens -> %s (inert=%d)", result, inert)
    return result


def parse(
    argv: Sequence[str] | None = None, *, include_program_name: bool = False
) -> ParseResult:
    """
    Classify process arguments.

    Args:
        argv (Sequence[str] | None): The full argument vector, program name
            first. Defaults to `sys.argv`.
        include_program_name (bool): Scan the first token too instead of
            skipping it.

    Returns:
        ParseResult: The classified arguments, options and flags.
    """
    if argv is None:
        argv = sys.argv
    tokens = argv if include_program_name else argv[1:]
    return classify(tokens)
