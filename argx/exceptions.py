# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by argx.

Classification itself never fails on string input. Only the strict accessors of
`ParseResult` raise, when the requested positional argument or option cannot be
produced. The or-default accessors return the caller's fallback instead.

Exception Hierarchy:
- ArgxError
    ├── ArgumentIndexError (also an IndexError)
    ├── OptionKeyError (also a KeyError)
    └── OptionValueError (also a LookupError)

Each error also subclasses the matching builtin so callers can catch either the
argx type or the plain Python lookup error.
"""


class ArgxError(Exception):
    """Base exception for argx."""


class ArgumentIndexError(ArgxError, IndexError):
    """Exception raised when a positional argument index is out of range."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Argument index out of range: {index} (size={size})")


class OptionKeyError(ArgxError, KeyError):
    """Exception raised when none of the requested option keys is present."""

    def __init__(self, keys: tuple[str, ...]) -> None:
        self.keys = keys
        super().__init__(f"Option key not found: {', '.join(keys) or '<none>'}")

    def __str__(self) -> str:
        return str(self.args[0])


class OptionValueError(ArgxError, LookupError):
    """Exception raised when a matched option is present but has no values."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Option '{key}' has no value")
