"""
Objects component - helpers for plain key-value mappings.
"""

from ._impl import (
    deep_clone,
    deep_merge,
    entries,
    flatten_object,
    from_entries,
    get_path,
    invert,
    is_empty,
    map_values,
    omit,
    pick,
    set_path,
)

__all__ = [
    "deep_clone",
    "deep_merge",
    "entries",
    "flatten_object",
    "from_entries",
    "get_path",
    "invert",
    "is_empty",
    "map_values",
    "omit",
    "pick",
    "set_path",
]
