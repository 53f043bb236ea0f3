"""Tests for operation selection."""

import pytest

from woodev.core.errors import SelectionError
from woodev.core.operations.base import operation
from woodev.core.operations.registry import OperationRegistry
from woodev.core.operations.selection import resolve_selection
from woodev.core.operations.types import OperationResult


def noop(config):
    return OperationResult.ok(None)


@pytest.fixture
def registry():
    return OperationRegistry(
        [
            operation("A", noop),
            operation("B", noop, flags=["x"]),
            operation("C", noop, flags=["x"]),
            operation("D", noop, flags=["y"]),
        ]
    )


def names(ops):
    return [op.name for op in ops]


def test_flags_select_in_registration_order(registry):
    assert names(resolve_selection(registry, None, {"x"})) == ["B", "C"]


def test_name_and_flags_combined(registry):
    assert names(resolve_selection(registry, "A", {"x"})) == ["A", "B", "C"]


def test_explicit_name_sorted_by_order(registry):
    assert names(resolve_selection(registry, "D", ["x"])) == ["B", "C", "D"]


def test_duplicate_selection_collapses(registry):
    selected = resolve_selection(registry, "B", ["x"])
    assert names(selected) == ["B", "C"]


def test_flag_order_irrelevant(registry):
    first = resolve_selection(registry, None, ["y", "x"])
    second = resolve_selection(registry, None, ["x", "y"])
    assert names(first) == names(second) == ["B", "C", "D"]


def test_unknown_name_raises(registry):
    with pytest.raises(SelectionError) as exc_info:
        resolve_selection(registry, "Z", ["x"])
    assert exc_info.value.name == "Z"
    assert str(exc_info.value) == '"Z" is an invalid operation'


def test_empty_selection(registry):
    assert resolve_selection(registry, None, []) == []
    assert resolve_selection(registry, None, ["q"]) == []


def test_unknown_flags_ignored(registry):
    assert names(resolve_selection(registry, "A", ["q"])) == ["A"]
