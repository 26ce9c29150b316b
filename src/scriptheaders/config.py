"""Header map configuration.

HeaderMapConfig is a frozen dataclass, immutable after creation and shared
safely between map instances.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HeaderMapConfig:
    """Behavior switches for ``CaseInsensitiveHeaderMap``.

    Defaults give the corrected ``add`` behavior::

        config = HeaderMapConfig(legacy_add=True)
        headers = CaseInsensitiveHeaderMap(config=config)
    """

    # Reproduce the original add() lookup: the first add for a new name
    # raises HeaderInsertionError instead of storing the value.
    legacy_add: bool = False

    # Emit a DEBUG record on the "scriptheaders" logger for each new entry
    log_new_entries: bool = True


DEFAULT_CONFIG = HeaderMapConfig()
