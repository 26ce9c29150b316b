"""OrderedMultiValueStringMap protocol and its default storage.

The header map only ever talks to its backing store through the small
structural protocol below, so scripts or tests can hand in any object that
provides the same primitives.
"""

from collections.abc import Iterator, Mapping, Sequence
from string import ascii_lowercase, ascii_uppercase
from typing import Protocol, runtime_checkable

_ASCII_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ``A``-``Z`` only. Non-ASCII characters pass through untouched."""
    return text.translate(_ASCII_LOWER)


def equals_ignore_case(a: str, b: str) -> bool:
    """Compare two header names ignoring ASCII letter case."""
    return len(a) == len(b) and ascii_lower(a) == ascii_lower(b)


@runtime_checkable
class OrderedMultiValueStringMap(Protocol):
    """A mutable string mapping where keys hold an ordered list of values.

    Keys are unique by exact string equality. Iteration follows insertion
    order. Only the primitives the header map needs are part of the protocol.
    """

    def put(self, key: str, values: list[str]) -> None: ...
    def contains_key_ignore_case(self, key: str) -> bool: ...
    def get_case_insensitive(self, key: str, default: str) -> str: ...
    def entries(self) -> Iterator[tuple[str, list[str]]]: ...


class StringToStringsMap:
    """Insertion-ordered ``str -> list[str]`` storage.

    ``put`` stores the given list object itself; callers that append to it
    later mutate the stored entry.
    """

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, str | Sequence[str]] | None = None) -> None:
        self._data: dict[str, list[str]] = {}
        if initial:
            for key, value in initial.items():
                if isinstance(value, str):
                    self._data[key] = [value]
                else:
                    self._data[key] = list(value)

    def put(self, key: str, values: list[str]) -> None:
        """Insert or replace *key* using its exact casing."""
        self._data[key] = values

    def contains_key(self, key: str) -> bool:
        return key in self._data

    def contains_key_ignore_case(self, key: str) -> bool:
        return any(equals_ignore_case(key, name) for name in self._data)

    def get_first(self, key: str, default: str) -> str:
        """Return the first value stored under exactly *key*, or *default*."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_case_insensitive(self, key: str, default: str) -> str:
        """Return the first value of the first case-insensitive match.

        Only the first matching key is consulted; if its list is empty the
        *default* is returned even when a later variant holds values.
        """
        for name in self._data:
            if equals_ignore_case(key, name):
                return self.get_first(name, default)
        return default

    def entries(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(key, values)`` pairs in insertion order."""
        return iter(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"StringToStringsMap({self._data!r})"
