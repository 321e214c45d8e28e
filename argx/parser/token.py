# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TokenKind` and the helpers that decide what a single raw token is.

A token's shape is fully described by how many leading dashes it carries:

- no dash: a bare word, either a positional argument or an option value
- one dash: introduces an option (`-key`)
- two or more dashes: names a flag (`--verbose`, `---x`)
- nothing but dashes: inert, ignored by the classifier

Example:
    split_token("--debug")  → (2, "debug")
    token_kind("-k")        → TokenKind.OPTION
    token_kind("--")        → TokenKind.INERT
"""
from __future__ import annotations

from enum import Enum


class TokenKind(Enum):
    """
    The shape of a raw token as seen by the classifier.

    Members:
        BARE: No leading dash. Positional argument or value of a pending option.
        OPTION: Exactly one leading dash followed by a name.
        FLAG: Two or more leading dashes followed by a name.
        INERT: Only dashes. Carries no name and is skipped.
    """

    BARE = "bare"
    OPTION = "option"
    FLAG = "flag"
    INERT = "inert"

    def __str__(self) -> str:
        return self.value


def dash_prefix_count(token: str) -> int:
    """Return the number of consecutive leading '-' characters in `token`."""
    return len(token) - len(token.lstrip("-"))


def split_token(token: str) -> tuple[int, str]:
    """
    Split a token into its dash-prefix count and the remainder.

    Args:
        token (str): The raw token.

    Returns:
        tuple[int, str]: The number of leading dashes and the token without them.

    Raises:
        TypeError: If `token` is not a string.
    """
    if not isinstance(token, str):
        raise TypeError(f"Token must be a string, got {type(token).__name__}")
    remainder = token.lstrip("-")
    return len(token) - len(remainder), remainder


def read_token(token: str) -> tuple[TokenKind, str]:
    """
    Return the kind of `token` together with the name it carries.

    Bare tokens are returned unchanged. Options lose their single dash, flags
    lose every leading dash and inert tokens carry an empty name.
    """
    dashes, remainder = split_token(token)
    if dashes == 0:
        return TokenKind.BARE, token
    if not remainder:
        return TokenKind.INERT, remainder
    if dashes == 1:
        return TokenKind.OPTION, remainder
    return TokenKind.FLAG, remainder


def token_kind(token: str) -> TokenKind:
    """Classify the shape of a single token."""
    return read_token(token)[0]
