"""Unit tests for :mod:`truenit.registry`."""

import pytest

from truenit.errors import TestNotFoundError
from truenit.registry import Registry, Test


def body_one():
    """A test body."""


def body_two():
    """Another test body."""


@pytest.fixture
def registry() -> Registry:
    """An empty registry."""
    return Registry()


def test_append_preserves_order(registry) -> None:
    """Entries iterate in insertion order."""
    registry.append(Test("b", body_one))
    registry.append(Test("a", body_two))
    assert [t.name for t in registry] == ["b", "a"]
    assert len(registry) == 2


def test_duplicates_are_kept(registry) -> None:
    """Registering the same pair twice yields two entries."""
    registry.append(Test("a", body_one))
    registry.append(Test("a", body_one))
    assert len(registry) == 2


def test_remove_matches_name_and_body(registry) -> None:
    """Removing (name, body2) leaves (name, body1) in place."""
    registry.append(Test("same", body_one))
    registry.append(Test("same", body_two))

    removed = registry.remove_first("same", body_two)

    assert removed == Test("same", body_two)
    assert list(registry) == [Test("same", body_one)]


def test_remove_only_first_match(registry) -> None:
    """Only the first matching entry is removed; survivors keep their order."""
    registry.append(Test("x", body_one))
    registry.append(Test("y", body_two))
    registry.append(Test("x", body_one))

    registry.remove_first("x", body_one)

    assert [t.name for t in registry] == ["y", "x"]


@pytest.mark.parametrize(("name", "body"), [("a", body_two), ("b", body_one)])
def test_remove_requires_both_to_match(registry, name, body) -> None:
    """A matching name with another body (or vice versa) is not found."""
    registry.append(Test("a", body_one))
    with pytest.raises(TestNotFoundError):
        registry.remove_first(name, body)
    assert len(registry) == 1


def test_bound_methods_match_by_owner() -> None:
    """A bound method matches a fresh binding of the same method on the same object."""

    class Suite:  # pylint: disable=too-few-public-methods
        def check(self):
            """A test body."""

    suite = Suite()
    registry = Registry()
    registry.append(Test("method", suite.check))
    assert registry.contains("method", suite.check)
    assert not registry.contains("method", Suite().check)


def test_contains(registry) -> None:
    """contains() checks the (name, body) pair."""
    registry.append(Test("a", body_one))
    assert registry.contains("a", body_one)
    assert not registry.contains("a", body_two)


def test_clear(registry) -> None:
    """clear() empties the registry and is a no-op when already empty."""
    registry.append(Test("a", body_one))
    registry.clear()
    assert len(registry) == 0
    registry.clear()
    assert list(registry) == []


def test_labels(registry) -> None:
    """labels() renders every entry in order."""
    registry.append(Test("a", body_one))
    registry.append(Test("bb", body_two))
    assert registry.labels() == ["   Testing a...  ", "   Testing bb...  "]
    assert registry.labels(indented=False) == ["Testing a...  ", "Testing bb...  "]


def test_iteration_is_a_snapshot(registry) -> None:
    """Mutating during iteration does not disturb the iterator."""
    registry.append(Test("a", body_one))
    registry.append(Test("b", body_two))
    seen = []
    for test in registry:
        seen.append(test.name)
        registry.clear()
    assert seen == ["a", "b"]
