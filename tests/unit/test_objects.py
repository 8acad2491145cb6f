"""
Tests for the objects component.
"""

import pytest

from primkit.components.objects import (
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


class TestCloneAndMerge:
    def test_deep_clone_is_independent(self) -> None:
        original = {"a": {"b": [1, 2]}}
        clone = deep_clone(original)
        clone["a"]["b"].append(3)
        assert original == {"a": {"b": [1, 2]}}

    def test_deep_merge_nested(self) -> None:
        merged = deep_merge({"a": {"x": 1}, "k": 1}, {"a": {"y": 2}}, {"k": 2})
        assert merged == {"a": {"x": 1, "y": 2}, "k": 2}

    def test_deep_merge_replaces_lists_and_scalars(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_deep_merge_does_not_mutate(self) -> None:
        left = {"a": {"x": 1}}
        deep_merge(left, {"a": {"y": 2}})
        assert left == {"a": {"x": 1}}

    def test_deep_merge_result_shares_no_leaves(self) -> None:
        right = {"a": [1, 2], "b": {"c": [3]}}
        merged = deep_merge({}, right)
        merged["a"].append(9)
        merged["b"]["c"].append(9)
        assert right == {"a": [1, 2], "b": {"c": [3]}}

    def test_deep_merge_rejects_non_mapping(self) -> None:
        with pytest.raises(TypeError):
            deep_merge({"a": 1}, [("b", 2)])


class TestKeySelection:
    def test_pick(self) -> None:
        assert pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"]) == {"a": 1, "c": 3}

    def test_omit(self) -> None:
        assert omit({"a": 1, "b": 2, "c": 3}, ["b"]) == {"a": 1, "c": 3}

    def test_is_empty(self) -> None:
        assert is_empty({})
        assert not is_empty({"a": None})


class TestPaths:
    def test_get_path(self) -> None:
        data = {"a": {"b": [10, 20]}}
        assert get_path(data, "a.b.1") == 20
        assert get_path(data, "a.b") == [10, 20]

    def test_get_path_missing_returns_default(self) -> None:
        data = {"a": {"b": [10, 20]}}
        assert get_path(data, "a.missing") is None
        assert get_path(data, "a.b.5", "n/a") == "n/a"
        assert get_path(data, "a.b.x", 0) == 0

    def test_get_path_keeps_stored_none(self) -> None:
        assert get_path({"a": None}, "a", "default") is None

    def test_empty_path_raises(self) -> None:
        with pytest.raises(ValueError):
            get_path({"a": 1}, "")

    def test_set_path_creates_intermediates(self) -> None:
        assert set_path({}, "a.b.c", 1) == {"a": {"b": {"c": 1}}}

    def test_set_path_leaves_input_untouched(self) -> None:
        original = {"a": {"b": 1, "c": 2}}
        updated = set_path(original, "a.b", 9)
        assert updated == {"a": {"b": 9, "c": 2}}
        assert original == {"a": {"b": 1, "c": 2}}

    def test_set_path_replaces_non_mapping(self) -> None:
        assert set_path({"a": 5}, "a.b", 1) == {"a": {"b": 1}}

    def test_set_path_replaces_list_item(self) -> None:
        original = {"a": [1, 2]}
        assert set_path(original, "a.0", 9) == {"a": [9, 2]}
        assert original == {"a": [1, 2]}

    def test_set_path_appends_at_list_end(self) -> None:
        assert set_path({"a": [1]}, "a.1", 2) == {"a": [1, 2]}
        assert set_path({"a": [1, 2]}, "a.-1", 5) == {"a": [1, 5]}

    def test_set_path_through_list(self) -> None:
        original = {"a": [{"b": 1}, {"b": 2}]}
        assert set_path(original, "a.1.b", 5) == {"a": [{"b": 1}, {"b": 5}]}
        assert original == {"a": [{"b": 1}, {"b": 2}]}

    @pytest.mark.parametrize("path", ["a.x", "a.5", "a.-3", "a.x.b"])
    def test_set_path_bad_list_index_raises(self, path: str) -> None:
        with pytest.raises(ValueError):
            set_path({"a": [1, 2]}, path, 0)


class TestReshaping:
    def test_flatten_object(self) -> None:
        data = {"a": {"b": 1, "c": {"d": 2}}, "e": [1]}
        assert flatten_object(data) == {"a.b": 1, "a.c.d": 2, "e": [1]}

    def test_flatten_object_keeps_empty_mapping(self) -> None:
        assert flatten_object({"a": {}}) == {"a": {}}

    def test_flatten_object_separator(self) -> None:
        assert flatten_object({"a": {"b": 1}}, separator="_") == {"a_b": 1}

    def test_invert(self) -> None:
        assert invert({"a": 1, "b": 2}) == {"1": "a", "2": "b"}
        assert invert({"a": 1, "b": 1}) == {"1": "b"}

    def test_entries_round_trip(self) -> None:
        data = {"a": 1, "b": 2}
        assert entries(data) == [("a", 1), ("b", 2)]
        assert from_entries(entries(data)) == data

    def test_map_values(self) -> None:
        assert map_values({"a": 1, "b": 2}, lambda v, k: f"{k}={v * 10}") == {
            "a": "a=10",
            "b": "b=20",
        }
