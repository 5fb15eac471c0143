"""The truenit test runner.

`Truenit` owns a `Registry` and runs its tests in registration order with
fail-fast semantics: the first failing test prints a report and ends the
process with exit status 1, so "All tests passed!" is only ever printed when
every test passed.

Every public entry point runs inside `truenit.utils.guard`, so callers never
see an exception: an operation either completes or terminates the process
with diagnostic output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from . import assertions
from .colors import Style
from .config import FINISH_BANNER, PASSED_MARKER, START_BANNER, get_color_preference
from .logging import running_test
from .registry import Registry, Test
from .utils import (
    Execution,
    compute_label,
    execute,
    guard,
    guarded,
    pad_left,
    require,
    reverse,
    write,
    write_line,
)

logger = logging.getLogger(__name__)

_UNSET = object()


def _validate(name: Any, body: Any) -> None:
    require(isinstance(name, str), f"invalid name: {name!r}")
    require(callable(body), f"invalid body: {body!r}")


class Truenit:
    """Registers, runs and reports tests.

    Args:
        color: True to force ANSI styling, False to strip it, None to style
            only when stdout is a terminal. Defaults to the ``TRUENIT_COLOR``
            / ``NO_COLOR`` environment preference.
        registry: Registry to run; a fresh one is created when omitted.

    Example:
        ```py
        runner = Truenit()
        runner.register("adds", lambda: Truenit.ok(1 + 1 == 2)).run_all()
        ```
    """

    ok = staticmethod(assertions.ok)
    not_ok = staticmethod(assertions.not_ok)
    assert_equal = staticmethod(assertions.assert_equal)
    assert_approx = staticmethod(assertions.assert_approx)
    assert_array_approx = staticmethod(assertions.assert_array_approx)

    def __init__(self, color: Any = _UNSET, registry: Registry | None = None) -> None:
        self._color = color
        self.registry = registry if registry is not None else Registry()

    @property
    def color(self) -> bool | None:
        """Colour preference for this runner's output.

        Unless one was passed in, it is read from the environment on first
        use; an invalid ``TRUENIT_COLOR`` is reported and exits there.
        """
        if self._color is _UNSET:
            self._color = guard(get_color_preference)
        return self._color

    @color.setter
    def color(self, value: bool | None) -> None:
        self._color = value

    @property
    def tests(self) -> tuple[Test, ...]:
        """Snapshot of the registered tests, in registration order."""
        return tuple(self.registry)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @guarded
    def register(self, name: str, body: Callable[[], Any]) -> Truenit:
        """Register *body* under *name* to be run by `run_all`.

        Register every test before calling `run_all` so the output of the
        whole batch lines up.
        """
        _validate(name, body)
        self.registry.append(Test(name, body))
        return self

    @guarded
    def register_throwing(self, name: str, body: Callable[[], Any]) -> Truenit:
        """Register a test that passes only if *body* raises.

        If *body* returns normally the test fails with
        ``"<name> test did not throw."``.
        """
        return self.register(name, reverse(name, body))

    @guarded
    def remove(self, name: str, body: Callable[[], Any]) -> Truenit:
        """Remove the first registered test matching (name, body).

        Both must match; a test registered with `register_throwing` is stored
        under its wrapper and cannot be removed by the original body.
        """
        _validate(name, body)
        self.registry.remove_first(name, body)
        return self

    def clear(self) -> Truenit:
        """Remove every registered test. A no-op on an empty registry."""
        self.registry.clear()
        return self

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    @guarded
    def run_all(self) -> Truenit:
        """Run every registered test in order.

        Does nothing when the registry is empty. Halts the process on the
        first failure, so the closing banner only appears if all passed.
        """
        if not len(self.registry):
            return self

        logger.debug("Running %d registered tests", len(self.registry))

        def run_registered() -> None:
            for test in self.registry:
                self.run_one(test.name, test.body)

        execute(
            Execution(
                body=run_registered,
                on_start=partial(
                    write, START_BANNER, Style.RESET, Style.UNDERSCORE, color=self.color
                ),
                on_finish=partial(
                    write_line, FINISH_BANNER, Style.FG_GREEN, color=self.color
                ),
            ),
            color=self.color,
        )
        return self

    @guarded
    def run_one(self, name: str, body: Callable[[], Any]) -> Truenit:
        """Run a single test, registered or not.

        Registered tests are indented under the batch banner. The
        ``Passed.`` marker (or failure report) is padded so it lines up with
        the widest label among the registered tests and this one.
        """
        _validate(name, body)

        registered = self.registry.contains(name, body)
        label = compute_label(name, registered)
        width = max([len(label), *map(len, self.registry.labels(indented=True))])
        spaces = width - len(label)
        label_style = Style.DIM if registered else Style.RESET
        marker = pad_left(PASSED_MARKER, spaces)

        with running_test(name):
            logger.debug("Starting test %r", name)
            state = execute(
                Execution(
                    body=body,
                    on_start=partial(write, label, label_style, color=self.color),
                    on_finish=partial(write, marker, color=self.color),
                    failure_indent=spaces,
                ),
                color=self.color,
            )
            logger.debug("Test %r finished: %s", name, state.value)
        return self

    @guarded
    def throws(self, name: str, body: Callable[[], Any]) -> Truenit:
        """Run *body* now, passing only if it raises."""
        return self.run_one(name, reverse(name, body))
