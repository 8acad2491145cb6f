"""
Objects component - helpers for plain key-value mappings.

Key behaviors:
- Inputs are never mutated; set_path copies every container on the path
- Dot paths step through mappings by key and through sequences by index
- deep_merge merges nested mappings and replaces everything else
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

V = TypeVar("V")
U = TypeVar("U")

_MISSING = object()


def _require_mapping(obj: object, name: str = "obj") -> Mapping[Any, Any]:
    if not isinstance(obj, Mapping):
        raise TypeError(f"{name} must be a mapping, got {type(obj).__name__}")
    return obj


def _split_path(path: str) -> list[str]:
    if not isinstance(path, str):
        raise TypeError("path must be a string")
    if not path:
        raise ValueError("path cannot be empty")
    return path.split(".")


# --- Copying and Merging ---


def deep_clone(value: V) -> V:
    """Independent deep copy of value."""
    return copy.deepcopy(value)


def deep_merge(*objects: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge mappings left to right.

    Nested mappings are merged recursively; any other value, lists
    included, replaces what came before and is deep-copied, so the
    result shares no mutable state with the arguments.

    Example:
        deep_merge({"a": {"x": 1}}, {"a": {"y": 2}}) -> {"a": {"x": 1, "y": 2}}
    """
    result: dict[str, Any] = {}
    for obj in objects:
        _require_mapping(obj, "each argument")
        for key, value in obj.items():
            if isinstance(value, Mapping):
                existing = result.get(key)
                base = existing if isinstance(existing, Mapping) else {}
                result[key] = deep_merge(base, value)
            else:
                result[key] = copy.deepcopy(value)
    return result


# --- Key Selection ---


def pick(obj: Mapping[str, V], keys: Iterable[str]) -> dict[str, V]:
    """New dict with only the listed keys that exist in obj."""
    obj = _require_mapping(obj)
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[str, V], keys: Iterable[str]) -> dict[str, V]:
    """New dict without the listed keys."""
    obj = _require_mapping(obj)
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def is_empty(obj: Mapping[Any, Any]) -> bool:
    return len(_require_mapping(obj)) == 0


# --- Dot Paths ---


def _step(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if isinstance(container, Sequence) and not isinstance(container, str | bytes):
        try:
            return container[int(key)]
        except (ValueError, IndexError):
            return _MISSING
    return _MISSING


def get_path(obj: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """
    Look up a dot-separated path.

    Example:
        get_path({"a": {"b": [10, 20]}}, "a.b.1") -> 20
        get_path({"a": {}}, "a.missing", "n/a") -> "n/a"
    """
    current: Any = _require_mapping(obj)
    for key in _split_path(path):
        current = _step(current, key)
        if current is _MISSING:
            return default
    return current


def _copy_container(value: Any) -> dict[Any, Any] | list[Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return list(value)
    return None


def _list_index(container: list[Any], key: str) -> int:
    """Position for key in container; len(container) means append."""
    try:
        index = int(key)
    except ValueError:
        raise ValueError(f"'{key}' is not a valid list index") from None
    if index < 0:
        index += len(container)
    if not 0 <= index <= len(container):
        raise ValueError(f"List index {key} is out of range")
    return index


def _assign(container: dict[Any, Any] | list[Any], key: str, value: Any) -> None:
    if isinstance(container, dict):
        container[key] = value
        return
    index = _list_index(container, key)
    if index == len(container):
        container.append(value)
    else:
        container[index] = value


def set_path(obj: Mapping[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Copy of obj with value stored at a dot-separated path.

    Containers along the path are copied, so obj itself is left untouched.
    Lists (and other sequences, copied as lists) are stepped into by index,
    and an index equal to the length appends. Missing or scalar
    intermediate values become new dicts.

    Example:
        set_path({"a": [1, 2]}, "a.0", 9) -> {"a": [9, 2]}

    Raises:
        ValueError: If a key on a list is not an in-range integer index.
    """
    keys = _split_path(path)
    result = dict(_require_mapping(obj))

    current: dict[Any, Any] | list[Any] = result
    for key in keys[:-1]:
        if isinstance(current, dict):
            existing = current.get(key)
        else:
            index = _list_index(current, key)
            existing = current[index] if index < len(current) else None
        child = _copy_container(existing)
        if child is None:
            child = {}
        _assign(current, key, child)
        current = child

    _assign(current, keys[-1], value)
    return result


# --- Reshaping ---


def flatten_object(
    obj: Mapping[str, Any],
    prefix: str = "",
    separator: str = ".",
) -> dict[str, Any]:
    """
    Flatten nested mappings into separator-joined keys.

    Example:
        flatten_object({"a": {"b": 1}, "c": [1]}) -> {"a.b": 1, "c": [1]}
    """
    result: dict[str, Any] = {}
    for key, value in _require_mapping(obj).items():
        new_key = f"{prefix}{separator}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            result.update(flatten_object(value, new_key, separator))
        else:
            result[new_key] = value
    return result


def invert(obj: Mapping[str, Any]) -> dict[str, str]:
    """Swap keys and values; values are stringified, later keys win."""
    return {str(value): key for key, value in _require_mapping(obj).items()}


def from_entries(pairs: Iterable[tuple[str, V]]) -> dict[str, V]:
    return {key: value for key, value in pairs}


def entries(obj: Mapping[str, V]) -> list[tuple[str, V]]:
    return list(_require_mapping(obj).items())


def map_values(
    obj: Mapping[str, V],
    fn: Callable[[V, str], U],
) -> dict[str, U]:
    """Apply fn(value, key) to every value."""
    return {key: fn(value, key) for key, value in _require_mapping(obj).items()}
