"""Hypothesis property tests for the test registry.

For any sequence of register/remove operations the registry must equal the
registered pairs minus, per successful remove, exactly the first matching
pair, with survivors in their original relative order. Removing a pair that
is not present raises and leaves the registry untouched.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from truenit.errors import TestNotFoundError
from truenit.registry import Registry, Test

pytestmark = [pytest.mark.property]

NAMES = ["alpha", "beta", "gamma"]
BODIES = [lambda: None for _ in range(3)]

operations = st.lists(
    st.tuples(
        st.sampled_from(["register", "remove"]),
        st.sampled_from(NAMES),
        st.integers(min_value=0, max_value=len(BODIES) - 1),
    ),
    max_size=40,
)


@given(operations)
def test_registry_matches_model(ops) -> None:
    """The registry behaves like a list with remove-first-match semantics."""
    registry = Registry()
    model: list[tuple[str, int]] = []

    for op, name, index in ops:
        body = BODIES[index]
        if op == "register":
            registry.append(Test(name, body))
            model.append((name, index))
        elif (name, index) in model:
            registry.remove_first(name, body)
            model.remove((name, index))
        else:
            with pytest.raises(TestNotFoundError):
                registry.remove_first(name, body)

        assert [(t.name, t.body) for t in registry] == [
            (n, BODIES[i]) for n, i in model
        ]


@given(operations)
def test_clear_always_empties(ops) -> None:
    """clear() leaves nothing behind whatever came before."""
    registry = Registry()
    for _, name, index in ops:
        registry.append(Test(name, BODIES[index]))
    registry.clear()
    assert len(registry) == 0
