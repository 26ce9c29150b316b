"""scriptheaders exception hierarchy.

Missing headers are never errors: lookups report them as ``None``. The only
raised condition is the legacy insertion fault.
"""

from dataclasses import dataclass


class ScriptHeadersError(Exception):
    """Base for all scriptheaders-specific errors."""


@dataclass(frozen=True, slots=True)
class HeaderInsertionError(ScriptHeadersError):
    """Raised by ``add`` in legacy mode when the new value has nowhere to go.

    Legacy ``add`` creates an entry with an empty value list and then looks
    it up again through ``get``, which skips empty lists. The lookup finds
    nothing and the value cannot be appended. The empty entry stays in the
    map, so every later ``add`` for the same name fails the same way.
    """

    key: str

    def __str__(self) -> str:
        return (
            f"Cannot append to header {self.key!r}: the entry was created empty and "
            "case-insensitive lookup skips empty value lists "
            "(disable HeaderMapConfig.legacy_add to append directly)"
        )
