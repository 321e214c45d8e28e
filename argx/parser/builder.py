# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Mutable accumulator used while classifying tokens.

`ParseResultBuilder` is owned by a single classification pass. Once the scan is
done, `build()` freezes everything collected so far into a `ParseResult`. The
builder keeps no reference into the result, so further mutations never leak
into a snapshot that has already been handed out.
"""
from __future__ import annotations

from argx.parser.parse_result import ParseResult


class ParseResultBuilder:
    """Collects positional arguments, options and flags in encounter order."""

    def __init__(self) -> None:
        self._args: list[str] = []
        self._options: dict[str, list[str]] = {}
        self._flags: list[str] = []

    def arg(self, value: str) -> None:
        """Append a positional argument."""
        self._args.append(value)

    def option(self, key: str, value: str | None = None) -> None:
        """
        Register an option key, optionally appending a value to it.

        Registering a key that already exists keeps its values. A key registered
        without a value is present but valueless.
        """
        values = self._options.setdefault(key, [])
        if value is not None:
            values.append(value)

    def flag(self, name: str) -> None:
        """Append a flag name. Repeated flags are kept."""
        self._flags.append(name)

    def build(self) -> ParseResult:
        """Freeze the collected tokens into an immutable `ParseResult`."""
        return ParseResult(
            args=tuple(self._args),
            options={key: tuple(values) for key, values in self._options.items()},
            flags=tuple(self._flags),
        )

    def __str__(self) -> str:
        return (
            f"ParseResultBuilder(args={len(self._args)}, "
            f"options={len(self._options)}, flags={len(self._flags)})"
        )

    def __repr__(self) -> str:
        return str(self)
