# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the immutable view over one classification pass.

A result holds three collections:
- `args`: positional arguments in order of appearance
- `options`: option name → values, in encounter order across repeated occurrences
- `flags`: flag names in order of appearance, duplicates kept

Every collection is exposed as an immutable snapshot (tuples and a read-only
mapping), so a result can be shared freely between threads and callers.

Lookup helpers come in two variants:
- strict (`argument`, `option`): raise an `ArgxError` subclass on absence
- or-default (`arg_or_default`, `option_or_default`): return a fallback instead

Option lookups accept a single key or an ordered list of alias keys, e.g.
`result.option(["o", "output"])`. The first alias present in the result wins.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from argx.exceptions import ArgumentIndexError, OptionKeyError, OptionValueError


def _as_keys(keys: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(keys, str):
        return (keys,)
    return tuple(keys)


class OptionMap(dict):
    """
    A read-only dict of option name to values.

    Mutating methods raise `TypeError`. Copies and pickles rebuild the mapping
    through the constructor.
    """

    def _readonly(self, *_, **__):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __reduce__(self):
        return (type(self), (dict(self),))


@dataclass(frozen=True)
class ParseResult:
    """
    Immutable snapshot of classified command-line tokens.

    Attributes:
        args (tuple[str, ...]): Positional arguments.
        options (Mapping[str, tuple[str, ...]]): Option values keyed by option name.
        flags (tuple[str, ...]): Flag names.
    """

    args: tuple[str, ...] = ()
    options: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(
            self,
            "options",
            OptionMap(
                (key, tuple(values)) for key, values in self.options.items()
            ),
        )
        object.__setattr__(self, "flags", tuple(self.flags))

    def arg_size(self) -> int:
        """Return the number of positional arguments."""
        return len(self.args)

    def argument(self, index: int) -> str:
        """
        Get the positional argument at `index`.

        Negative indexes are out of range.

        Raises:
            ArgumentIndexError: If there is no argument at `index`.
        """
        if not 0 <= index < len(self.args):
            raise ArgumentIndexError(index, len(self.args))
        return self.args[index]

    def arg_or_default(self, index: int, default: Any = None) -> Any:
        """Get the positional argument at `index`, or `default` if out of range."""
        if not 0 <= index < len(self.args):
            return default
        return self.args[index]

    def option_size(self) -> int:
        """Return the number of distinct option keys."""
        return len(self.options)

    def has_option(self, keys: str | Iterable[str]) -> bool:
        """Return True if any of `keys` is present, valueless options included."""
        return any(key in self.options for key in _as_keys(keys))

    def _match(self, keys: tuple[str, ...]) -> str | None:
        return next((key for key in keys if key in self.options), None)

    def option(self, keys: str | Iterable[str]) -> str:
        """
        Get the first value of the first present option among `keys`.

        Args:
            keys (str | Iterable[str]): A key or an ordered list of alias keys.

        Returns:
            str: The first value recorded for the matched key.

        Raises:
            OptionKeyError: If none of the keys is present.
            OptionValueError: If the matched key is present but has no values.
        """
        keys = _as_keys(keys)
        key = self._match(keys)
        if key is None:
            raise OptionKeyError(keys)
        values = self.options[key]
        if not values:
            raise OptionValueError(key)
        return values[0]

    def option_or_default(self, keys: str | Iterable[str], default: Any = None) -> Any:
        """
        Get the first value of the first present option among `keys`.

        Returns `default` when no key is present or when the matched key is
        valueless.
        """
        key = self._match(_as_keys(keys))
        if key is None or not self.options[key]:
            return default
        return self.options[key][0]

    def option_values(self, keys: str | Iterable[str]) -> tuple[str, ...]:
        """
        Get every value of every present option among `keys`.

        Values are concatenated in alias order, each key keeping its own
        encounter order. Returns an empty tuple when nothing matches.
        """
        values: list[str] = []
        for key in _as_keys(keys):
            values.extend(self.options.get(key, ()))
        return tuple(values)

    def flag_size(self) -> int:
        """Return the number of flags, duplicates included."""
        return len(self.flags)

    def flag(self, name: str) -> bool:
        """Return True if `name` appears at least once among the flags."""
        return name in self.flags

    def flag_count(self, name: str) -> int:
        """Return how many times `name` was given as a flag."""
        return self.flags.count(name)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-serializable copy of the result."""
        return {
            "args": list(self.args),
            "options": {key: list(values) for key, values in self.options.items()},
            "flags": list(self.flags),
        }

    def __hash__(self) -> int:
        return hash((self.args, tuple(sorted(self.options.items())), self.flags))

    def __str__(self) -> str:
        return (
            f"ParseResult(args={self.arg_size()}, options={self.option_size()}, "
            f"flags={self.flag_size()})"
        )
