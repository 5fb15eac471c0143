"""Assertion helpers for use inside test bodies.

Each helper raises `truenit.errors.AssertionFailure` when its check does not
hold, which the runner reports as a failed test. Misuse (for example a
non-numeric operand to `assert_approx`) raises `InvalidArgumentError`.
"""

from collections.abc import Sequence
from numbers import Real
from typing import Any

from .config import DEFAULT_EPSILON, DEFAULT_TEST_MESSAGE
from .utils import check, require


def ok(predicate: Any, message: str | None = None) -> None:
    """Assert that *predicate* is truthy."""
    check(predicate, message or DEFAULT_TEST_MESSAGE)


def not_ok(predicate: Any, message: str | None = None) -> None:
    """Assert that *predicate* is falsy."""
    check(not predicate, message or DEFAULT_TEST_MESSAGE)


def assert_equal(a: Any, b: Any, message: str | None = None) -> None:
    """Assert that ``a == b``."""
    check(a == b, message or f"expected {a!r} to equal {b!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def assert_approx(
    a: float,
    b: float,
    message: str | None = None,
    epsilon: float = DEFAULT_EPSILON,
) -> None:
    """Assert that ``|a - b| < epsilon``.

    A difference of exactly *epsilon* fails.

    Raises:
        InvalidArgumentError: If *a* or *b* is not a real number, or *epsilon*
            is not strictly between 0 and 1.
        AssertionFailure: If the values are too far apart.
    """
    require(_is_number(a), f"invalid number: {a!r}")
    require(_is_number(b), f"invalid number: {b!r}")
    require(_is_number(epsilon) and 0 < epsilon < 1, f"invalid epsilon: {epsilon!r}")
    check(
        abs(a - b) < epsilon,
        message or f"expected {a!r} to be within {epsilon!r} of {b!r}",
    )


def assert_array_approx(
    a: Sequence[float],
    b: Sequence[float],
    message: str | None = None,
    epsilon: float = DEFAULT_EPSILON,
) -> None:
    """Assert that *a* and *b* hold approximately the same values.

    Order is ignored: sorted copies are compared element by element with
    `assert_approx`, so only the multiset of values matters.

    Raises:
        InvalidArgumentError: If either argument is not a sequence, or holds a
            non-numeric element.
        AssertionFailure: On a length mismatch or a differing element; the
            message names the offending index.
    """
    for values in (a, b):
        require(_is_sequence(values), f"invalid sequence: {values!r}")
    check(
        len(a) == len(b),
        f"{message or 'arrays differ'}: length {len(a)} != {len(b)}",
    )
    for value in (*a, *b):
        require(_is_number(value), f"invalid number: {value!r}")

    for index, (x, y) in enumerate(zip(sorted(a), sorted(b))):
        assert_approx(
            x,
            y,
            f"{message or 'arrays differ'} at index {index}: {x!r} != {y!r}",
            epsilon,
        )
