"""
Arrays component - sequence helpers.
"""

from ._impl import (
    chunk,
    compact,
    count_by,
    difference,
    first,
    flatten,
    group_by,
    intersection,
    last,
    number_range,
    shuffle,
    sort_by,
    unique,
)

__all__ = [
    "chunk",
    "compact",
    "count_by",
    "difference",
    "first",
    "flatten",
    "group_by",
    "intersection",
    "last",
    "number_range",
    "shuffle",
    "sort_by",
    "unique",
]
