"""Tests for the operation registry."""

import pytest

from woodev.core.operations.base import OperationDescriptor, operation
from woodev.core.operations.catalog import DEFAULT_ORDER
from woodev.core.operations.registry import OperationRegistry, get_default_registry
from woodev.core.operations.types import OperationResult


def noop(config):
    return OperationResult.ok(None)


@pytest.fixture
def registry():
    return OperationRegistry(
        [
            operation("a", noop),
            operation("b", noop, flags=["x"]),
            operation("c", noop, flags=["x", "y"]),
        ]
    )


def test_order_follows_registration(registry):
    assert [op.order for op in registry] == [0, 1, 2]
    assert registry.names() == ["a", "b", "c"]


def test_get_returns_descriptor(registry):
    op = registry.get("b")
    assert op is not None
    assert op.name == "b"
    assert op.order == 1


def test_get_unknown_returns_none(registry):
    assert registry.get("z") is None
    assert "z" not in registry
    assert "a" in registry


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="Duplicate operation name: a"):
        OperationRegistry([operation("a", noop), operation("a", noop)])


def test_registration_does_not_mutate_input():
    original = operation("a", noop)
    OperationRegistry([operation("z", noop), original])
    assert original.order == -1


def test_matching_uses_registration_order(registry):
    assert [op.name for op in registry.matching(["y", "x"])] == ["b", "c"]
    assert [op.name for op in registry.matching(["y"])] == ["c"]
    assert registry.matching([]) == []


def test_flags(registry):
    assert registry.flags() == frozenset({"x", "y"})
    assert len(registry) == 3


def test_descriptor_requires_name():
    with pytest.raises(ValueError):
        OperationDescriptor(name="  ", action=noop)


def test_descriptor_normalizes_flags():
    op = OperationDescriptor(name="a", action=noop, trigger_flags=["x", "x"])
    assert op.trigger_flags == frozenset({"x"})
    assert op.is_triggered_by({"x", "q"})
    assert not op.is_triggered_by({"q"})


def test_default_registry_order():
    registry = get_default_registry()
    assert registry.names() == DEFAULT_ORDER
    assert registry.get("open").on_all_complete is not None


def test_default_registry_is_rebuilt_per_call():
    assert get_default_registry() is not get_default_registry()
