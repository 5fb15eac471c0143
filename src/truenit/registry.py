"""Ordered registry of named tests."""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import TestNotFoundError
from .utils import compute_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Test:
    """A named, zero-argument test body.

    Identity is the (name, body) pair: the same name may be registered more
    than once with different bodies, or even with the same body.
    """

    __test__ = False

    name: str
    body: Callable[[], Any]

    def matches(self, name: str, body: Callable[[], Any]) -> bool:
        """Return True if this entry is the (name, body) pair given."""
        return self.name == name and self.body == body


class Registry:
    """Insertion-ordered collection of `Test` entries.

    Order determines both execution order and display order. Nothing is
    deduplicated.
    """

    def __init__(self) -> None:
        self._tests: list[Test] = []

    def __iter__(self) -> Iterator[Test]:
        return iter(tuple(self._tests))

    def __len__(self) -> int:
        return len(self._tests)

    def append(self, test: Test) -> None:
        """Add *test* at the end of the registry."""
        self._tests.append(test)
        logger.debug("Registered test %r (%d registered)", test.name, len(self))

    def contains(self, name: str, body: Callable[[], Any]) -> bool:
        """Return True if any entry matches the (name, body) pair."""
        return any(test.matches(name, body) for test in self._tests)

    def remove_first(self, name: str, body: Callable[[], Any]) -> Test:
        """Remove and return the first entry matching (name, body).

        Raises:
            TestNotFoundError: If no entry matches.
        """
        for index, test in enumerate(self._tests):
            if test.matches(name, body):
                del self._tests[index]
                logger.debug("Removed test %r (%d registered)", name, len(self))
                return test
        raise TestNotFoundError(name)

    def clear(self) -> None:
        """Remove every entry."""
        self._tests.clear()
        logger.debug("Cleared registry")

    def labels(self, indented: bool = True) -> list[str]:
        """Return the display label of every entry, in registration order."""
        return [compute_label(test.name, indented) for test in self._tests]
