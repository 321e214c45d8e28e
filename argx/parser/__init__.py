"""
Argx Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .builder import ParseResultBuilder
from .classifier import classify, parse
from .parse_result import ParseResult
from .token import TokenKind, dash_prefix_count, read_token, split_token, token_kind

__all__ = [
    "classify",
    "parse",
    "ParseResult",
    "ParseResultBuilder",
    "TokenKind",
    "dash_prefix_count",
    "read_token",
    "split_token",
    "token_kind",
]
