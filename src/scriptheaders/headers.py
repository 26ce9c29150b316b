"""Mutable, case-insensitive HTTP headers for request/response scripts.

Wraps an ``OrderedMultiValueStringMap`` and layers RFC 7230 header name
matching on top of it. Storage keeps the exact casing each name was first
added with; only lookups fold case, and only ASCII letters are folded.

One instance belongs to one request, response, or script execution. It is
not safe to share between threads without external locking.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import overload

from scriptheaders._internal.multimap import (
    OrderedMultiValueStringMap,
    StringToStringsMap,
    equals_ignore_case,
)
from scriptheaders.config import DEFAULT_CONFIG, HeaderMapConfig
from scriptheaders.errors import HeaderInsertionError

logger = logging.getLogger("scriptheaders")

_MISSING = object()


class CaseInsensitiveHeaderMap:
    """Case-insensitive multi-valued header map.

    ``get(name)`` returns the value list of the first entry whose name
    matches and whose list is non-empty, or ``None``.
    ``get(name, default)`` returns a single string instead.
    ``add`` appends, creating the entry under the given casing when needed.
    """

    __slots__ = ("_config", "_store")

    def __init__(
        self,
        store: OrderedMultiValueStringMap | None = None,
        *,
        config: HeaderMapConfig | None = None,
    ) -> None:
        if store is None:
            store = StringToStringsMap()
        elif not isinstance(store, OrderedMultiValueStringMap):
            msg = f"store must provide the OrderedMultiValueStringMap primitives, got {type(store).__name__}"
            raise TypeError(msg)
        self._store = store
        self._config = config or DEFAULT_CONFIG

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        *,
        config: HeaderMapConfig | None = None,
    ) -> "CaseInsensitiveHeaderMap":
        """Build headers by ``add``-ing each ``(name, value)`` pair in order."""
        headers = cls(config=config)
        for name, value in pairs:
            headers.add(name, value)
        return headers

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str | Sequence[str]],
        *,
        config: HeaderMapConfig | None = None,
    ) -> "CaseInsensitiveHeaderMap":
        """Seed storage directly with exact-case keys.

        Names differing only in case stay separate entries, and empty value
        lists are kept as they are.
        """
        return cls(StringToStringsMap(mapping), config=config)

    @property
    def config(self) -> HeaderMapConfig:
        return self._config

    @overload
    def get(self, key: str) -> list[str] | None: ...

    @overload
    def get(self, key: str, default: str) -> str: ...

    def get(self, key: str, default: object = _MISSING) -> list[str] | str | None:
        if default is not _MISSING:
            return self._store.get_case_insensitive(key, default)  # type: ignore[arg-type]
        for name, values in self._store.entries():
            if values and equals_ignore_case(key, name):
                return values
        return None

    def has_values(self, key: str) -> bool:
        """True when *key* matches an entry holding at least one value."""
        if not self._store.contains_key_ignore_case(key):
            return False
        values = self.get(key)
        return values is not None and len(values) > 0

    hasValues = has_values  # noqa: N815

    def add(self, key: str, value: str) -> None:
        """Append *value* to the header *key*, creating the entry if needed."""
        if not self._store.contains_key_ignore_case(key):
            self._store.put(key, [])
            if self._config.log_new_entries:
                logger.debug("new header entry %r", key)

        values = self.get(key)
        if values is None:
            if self._config.legacy_add:
                logger.warning("legacy add could not locate a non-empty entry for %r", key)
                raise HeaderInsertionError(key)
            # Entry exists but is empty; get() skips it, so append directly.
            values = self._first_match(key)
            if values is None:
                raise HeaderInsertionError(key)
        values.append(value)

    def _first_match(self, key: str) -> list[str] | None:
        for name, values in self._store.entries():
            if equals_ignore_case(key, name):
                return values
        return None

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Yield stored ``(name, values)`` pairs in insertion order."""
        return self._store.entries()

    def to_dict(self) -> dict[str, list[str]]:
        """Return a snapshot keyed by stored names, with copied value lists."""
        return {name: list(values) for name, values in self._store.entries()}

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._store.contains_key_ignore_case(key)

    def __iter__(self) -> Iterator[str]:
        for name, _ in self._store.entries():
            yield name

    def __len__(self) -> int:
        return sum(1 for _ in self._store.entries())

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {values!r}" for name, values in self._store.entries())
        return f"CaseInsensitiveHeaderMap({{{items}}})"
