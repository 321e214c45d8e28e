"""
Argx Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgumentIndexError, ArgxError, OptionKeyError, OptionValueError
from .parser import ParseResult, ParseResultBuilder, TokenKind, classify, parse

logger = logging.getLogger("argx")


__all__ = [
    "classify",
    "parse",
    "ParseResult",
    "ParseResultBuilder",
    "TokenKind",
    "ArgxError",
    "ArgumentIndexError",
    "OptionKeyError",
    "OptionValueError",
]
