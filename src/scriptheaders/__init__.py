"""scriptheaders: case-insensitive HTTP header maps for request/response scripts.

Header names match per RFC 7230 (ASCII case-insensitive) while the stored
names keep the casing they were first added with. The surface mirrors what
legacy ``StringToStringsMap`` scripts expect.

Basic usage::

    from scriptheaders import CaseInsensitiveHeaderMap

    headers = CaseInsensitiveHeaderMap()
    headers.add("Content-Type", "application/json")

    headers.get("content-type")            # ["application/json"]
    headers.hasValues("X-Missing")         # False
    headers.get("X-Missing", "text/plain") # "text/plain"
"""

__version__ = "0.1.0"
__all__ = [
    "CaseInsensitiveHeaderMap",
    "HeaderInsertionError",
    "HeaderMapConfig",
    "OrderedMultiValueStringMap",
    "ScriptHeadersError",
    "StringToStringsMap",
]

_LAZY_IMPORTS: dict[str, str] = {
    "CaseInsensitiveHeaderMap": "scriptheaders.headers",
    "HeaderInsertionError": "scriptheaders.errors",
    "HeaderMapConfig": "scriptheaders.config",
    "OrderedMultiValueStringMap": "scriptheaders._internal.multimap",
    "ScriptHeadersError": "scriptheaders.errors",
    "StringToStringsMap": "scriptheaders._internal.multimap",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
