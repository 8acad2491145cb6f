"""
Arrays component - sequence helpers.

Key behaviors:
- Inputs are never mutated; every helper returns a new list or dict
- Membership tests fall back to equality for unhashable items
- shuffle is Fisher-Yates over a copy with an injectable random.Random
"""

from __future__ import annotations

import math
import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, Literal, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

Direction = Literal["asc", "desc"]


class _Membership:
    """Set-like membership that tolerates unhashable items."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._hashed: set[Any] = set()
        self._unhashable: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return item in self._unhashable


# --- De-duplication and Set Operations ---


def unique(items: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each item."""
    seen = _Membership(())
    result: list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def intersection(*arrays: Iterable[T]) -> list[T]:
    """
    Items of the first array that appear in every other array.

    Order and duplicates follow the first array.
    """
    if not arrays:
        return []

    head, *rest = arrays
    result = list(head)
    for other in rest:
        members = _Membership(other)
        result = [item for item in result if item in members]
    return result


def difference(arr1: Iterable[T], arr2: Iterable[T]) -> list[T]:
    """Items of arr1 that are not in arr2."""
    excluded = _Membership(arr2)
    return [item for item in arr1 if item not in excluded]


# --- Reordering ---


def shuffle(items: Iterable[T], *, rng: random.Random | None = None) -> list[T]:
    """Shuffled copy of items (Fisher-Yates)."""
    source = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _sort_value(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item[key]
    return getattr(item, key)


def sort_by(items: Iterable[T], key: str, direction: Direction = "asc") -> list[T]:
    """
    Stable sort of mappings (by item[key]) or objects (by attribute).

    Raises:
        ValueError: If direction is not "asc" or "desc".
    """
    if direction not in ("asc", "desc"):
        raise ValueError(f"direction must be 'asc' or 'desc', got {direction!r}")
    return sorted(
        items,
        key=lambda item: _sort_value(item, key),
        reverse=direction == "desc",
    )


# --- Grouping ---


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by key_fn(item), preserving first-seen key order."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def count_by(
    items: Iterable[T],
    key_fn: Callable[[T], str] = str,
) -> dict[str, int]:
    """Count occurrences keyed by key_fn(item) (str by default)."""
    return dict(Counter(key_fn(item) for item in items))


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Split items into lists of size (the last may be shorter).

    An integral float size such as 2.0 is accepted.

    Raises:
        TypeError: If size is not a number.
        ValueError: If size is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, int | float):
        raise TypeError("size must be a number")
    if isinstance(size, float) and not (math.isfinite(size) and size.is_integer()):
        raise ValueError("size must be an integer")
    if size <= 0:
        raise ValueError("size must be a positive integer")
    step = int(size)
    values = list(items)
    return [values[i : i + step] for i in range(0, len(values), step)]


def flatten(items: Iterable[Any]) -> list[Any]:
    """Recursively flatten nested lists and tuples."""
    flat: list[Any] = []
    for item in items:
        if isinstance(item, list | tuple):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


# --- Construction ---


def number_range(
    start: int | float,
    end: int | float,
    step: int | float = 1,
) -> list[int | float]:
    """
    Inclusive arithmetic progression from start to end.

    Example:
        number_range(1, 5) -> [1, 2, 3, 4, 5]
        number_range(5, 1, -2) -> [5, 3, 1]

    Raises:
        ValueError: If step is zero or any argument is infinite or NaN.
    """
    for value in (start, end, step):
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError("All arguments must be numbers")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("All arguments must be finite")
    if step == 0:
        raise ValueError("step cannot be zero")

    result: list[int | float] = []
    i = 0
    value = start
    while (step > 0 and value <= end) or (step < 0 and value >= end):
        result.append(value)
        i += 1
        value = start + i * step
    return result


def compact(items: Iterable[T]) -> list[T]:
    """Drop falsy values."""
    return [item for item in items if item]


def first(items: Sequence[T]) -> T | None:
    return items[0] if items else None


def last(items: Sequence[T]) -> T | None:
    return items[-1] if items else None
