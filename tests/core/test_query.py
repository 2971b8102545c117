"""Tests for the query layer: is_branch, freeze, equals and has_changed."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from statebranch import (
    PropertyDescriptor,
    create,
    effective_identity,
    equals,
    freeze,
    has_changed,
    is_branch,
    is_dirty,
    is_frozen,
)


def test_is_branch_distinguishes_base_from_branch():
    base = {"a": 5}
    branch = create(base)

    assert is_branch(base) is False
    assert is_branch(branch) is True
    assert is_branch(create([1])) is True


@pytest.mark.parametrize("value", [None, 5, "text", (1, 2), object()])
def test_queries_on_scalars_are_false(value):
    assert is_branch(value) is False
    assert is_frozen(value) is False
    assert is_dirty(value) is False
    assert has_changed(value) is False


def test_queries_on_plain_composites_are_false():
    assert is_frozen({"a": 1}) is False
    assert is_dirty([1]) is False
    assert has_changed({"a": 1}) is False


class TestFreeze:
    def test_shallow_freeze_without_deep_param(self):
        base = {"a": 5, "b": {"c": 6}}
        branch = create(base)

        freeze(branch)

        assert is_frozen(branch)
        assert not is_frozen(branch["b"])

        # First level is frozen
        branch["c"] = 10
        assert branch.get("c") is None

        # Second level is not
        branch["b"]["a"] = 2
        assert branch["b"]["a"] == 2

    def test_deep_freeze_when_param_set(self):
        base = {"a": 5, "b": {"c": 6}}
        branch = create(base)

        freeze(branch, True)

        assert is_frozen(branch)
        assert is_frozen(branch["b"])

        branch["c"] = 10
        assert branch.get("c") is None

        branch["b"]["a"] = 2
        assert branch["b"].get("a") is None

    def test_deep_freeze_reaches_materialized_children(self):
        branch = create({"b": {"c": {"d": 1}}, "list": [{"x": 1}]})
        middle = branch["b"]
        inner = middle["c"]

        freeze(branch, deep=True)

        inner["d"] = 2
        branch["list"][0]["x"] = 2

        assert inner["d"] == 1
        assert is_frozen(middle)
        assert is_frozen(branch["list"])
        assert branch["list"][0]["x"] == 1

    def test_frozen_branch_write_is_silent(self, caplog):
        branch = create({"a": 1})
        freeze(branch)

        with caplog.at_level(logging.ERROR):
            branch["a"] = 2

        assert branch["a"] == 1
        assert caplog.records == []

    def test_frozen_branch_delete_is_logged(self, caplog):
        branch = create({"a": 1})
        freeze(branch)

        with caplog.at_level(logging.ERROR):
            del branch["a"]

        assert branch["a"] == 1
        assert not is_dirty(branch)
        assert "Cannot delete key 'a' from a frozen branch" in caplog.text

    def test_frozen_branch_define_is_logged(self, caplog):
        branch = create({})
        freeze(branch)

        with caplog.at_level(logging.ERROR):
            assert branch.define("a", PropertyDescriptor(value=1)) is False

        assert "a" not in branch
        assert "frozen branch" in caplog.text

    def test_frozen_branch_still_materializes_reads(self):
        branch = create({"a": {"b": 1}})
        freeze(branch)

        assert branch["a"] is branch["a"]
        assert not is_dirty(branch)

    @pytest.mark.parametrize("value", [5, "text", {"a": 1}, [1, 2]])
    def test_freezing_non_branch_is_logged_no_op(self, value, caplog):
        with caplog.at_level(logging.ERROR):
            freeze(value)

        assert is_frozen(value) is False
        assert "Non-branch values cannot be frozen" in caplog.text


class TestEquals:
    def test_branch_equals_its_base(self):
        base = {"x": 5}
        first = create(base)
        second = create(base)

        assert equals(base, first)
        assert equals(first, first)
        assert equals(first, second)

        second["y"] = 10

        assert not equals(first, second)
        assert equals(second, second)

    def test_structurally_equal_bases_are_not_equal(self):
        first = create({"x": 5})
        other = create({"x": 5})

        assert not equals(other, first)

    def test_nested_children_equal_base_until_changed(self):
        base = {"a": {"b": 6}, "c": [2, 5]}
        branch = create(base)

        assert base["a"] is not branch["a"]
        assert equals(base["a"], branch["a"])
        assert base["c"] is not branch["c"]
        assert equals(base["c"], branch["c"])

        branch["a"]["b"] = 7
        branch["c"].append(3)

        assert not equals(base["a"], branch["a"])
        assert not equals(base["c"], branch["c"])

    def test_equals_resolves_through_clean_layers(self):
        base = {"x": 1}
        inner = create(base)
        outer = create(inner)

        assert equals(base, outer)

        inner["x"] = 2

        assert not equals(base, outer)
        assert equals(inner, outer)

    def test_effective_identity(self):
        base = {"x": 1}
        branch = create(base)

        assert effective_identity(branch) is base

        branch["x"] = 2

        assert effective_identity(branch) is branch

    def test_scalars_compare_by_value_and_type(self):
        assert equals(5, 5)
        assert equals("a", "a")
        assert not equals(1, True)
        assert not equals(5, 6)


class TestHasChanged:
    def test_reports_first_level_change(self):
        branch = create({"a": 5})

        assert has_changed(branch) is False

        branch["a"] = 6

        assert has_changed(branch) is True

    def test_reports_change_somewhere_below(self):
        branch = create({"a": 5, "b": [{"c": 6}]})

        assert has_changed(branch) is False

        branch["b"][0]["c"] = 7

        assert has_changed(branch) is True
        assert is_dirty(branch) is False

    def test_no_op_write_is_not_a_change(self):
        branch = create({"a": 5})

        branch["a"] = 5

        assert has_changed(branch) is False

    def test_walk_does_not_mark_dirty(self):
        branch = create({"a": {"b": {"c": 1}}})

        has_changed(branch)

        assert not is_dirty(branch)
        assert not is_dirty(branch["a"])


@given(st.dictionaries(st.text(max_size=3), st.integers(), max_size=5))
def test_fresh_branch_never_changed(base):
    """PROPERTY: A branch that was only read reports no change and equals its base."""
    branch = create(base)
    for key in branch:
        _ = branch[key]

    assert has_changed(branch) is False
    assert equals(base, branch)
