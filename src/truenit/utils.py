"""Formatting and error-boundary helpers shared by the truenit runner.

These helpers own the terminal contract: styled writes without implicit
newlines, label construction and padding, and `guard`, the single place where
an exception is allowed to end the process. Nothing outside `guard` lets an
exception reach the embedding script.
"""

from __future__ import annotations

import functools
import logging
import traceback
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

import click

from .colors import MAX_CODE, MIN_CODE, RESET_SEQUENCE, Style, sgr
from .config import DEFAULT_MESSAGE, EXIT_FAILURE, INDENT
from .errors import (
    AssertionFailure,
    DidNotThrowError,
    InvalidArgumentError,
    TestFailedError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
Body = Callable[[], Any]

# ============================================================================
#                               Assertions
# ============================================================================


def check(
    predicate: Any,
    message: str | None = None,
    *,
    error_type: type[Exception] = AssertionFailure,
) -> None:
    """Raise *error_type* when *predicate* is falsy.

    Args:
        predicate: Any value; only its truthiness matters.
        message: Error message. Defaults to ``"Assertion failed."``.
        error_type: Exception class to raise.

    Raises:
        AssertionFailure: (or *error_type*) if the predicate is falsy.
    """
    if not predicate:
        raise error_type(message or DEFAULT_MESSAGE)


def require(predicate: Any, message: str) -> None:
    """`check` for arguments: raises InvalidArgumentError when *predicate* is falsy."""
    check(predicate, message, error_type=InvalidArgumentError)


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# ============================================================================
#                               Terminal output
# ============================================================================


def _is_style_code(code: Any) -> bool:
    return (
        isinstance(code, int)
        and not isinstance(code, bool)
        and MIN_CODE <= code <= MAX_CODE
    )


def write(message: Any, *codes: int, color: bool | None = None) -> None:
    """Write *message* to stdout without a trailing newline.

    When style codes are given the message is wrapped in the matching ANSI
    escape sequences and followed by a reset. Click strips the escapes again
    when stdout is not a terminal, unless *color* forces them.

    Args:
        message: Anything with a string form; ``None`` is rejected.
        *codes: SGR codes from `truenit.colors.Style` (0-47).
        color: True to force styling, False to strip it, None for auto.

    Raises:
        InvalidArgumentError: If *message* is None or a code is not a valid SGR code.
    """
    require(message is not None, f"invalid message: {message!r}")
    require(all(map(_is_style_code, codes)), f"invalid colors: {codes!r}")

    text = f"{message}"
    if codes:
        text = f"{sgr(*codes)}{text}{RESET_SEQUENCE}"
    click.echo(text, nl=False, color=color)


def write_line(message: Any, *codes: int, color: bool | None = None) -> None:
    """Like `write`, but starts *message* on a new line."""
    write(f"\n{message}", *codes, color=color)


# ============================================================================
#                               Error boundary
# ============================================================================


class FatalExit(SystemExit):
    """Process exit raised by `guard` after it has reported an error.

    Test bodies may raise a plain `SystemExit` themselves (code under test
    calling ``sys.exit``); only this subclass means a nested guard already
    reported a failure and the process must end.
    """


def guard(task: Callable[[], T], *, color: bool | None = None) -> T:
    """Run *task*, turning any escaping exception into output plus exit(1).

    The error's message is written in red and the process terminates with
    status 1 by raising `FatalExit`. A `FatalExit` from a nested guard passes
    straight through, so a failure is reported once.

    Args:
        task: Zero-argument callable to execute.
        color: Colour preference for the error output.

    Returns:
        Whatever *task* returns when it completes.
    """
    try:
        return task()
    except Exception as error:  # pylint: disable=broad-except
        logger.debug("Guarded task failed, exiting", exc_info=True)
        write(f"{error}", Style.FG_RED, color=color)
        raise FatalExit(EXIT_FAILURE) from error


def guarded(method: Callable[..., T]) -> Callable[..., T]:
    """Decorate a method so it runs inside `guard`.

    The instance's ``color`` attribute, when present, styles the error output.
    """

    @functools.wraps(method)
    def wrapper(self, *args: Any, **kwargs: Any) -> T:
        return guard(
            functools.partial(method, self, *args, **kwargs),
            color=getattr(self, "color", None),
        )

    return wrapper


# ============================================================================
#                               Labels
# ============================================================================


def pad_left(text: str, count: int) -> str:
    """Prepend *count* spaces to *text*.

    Raises:
        InvalidArgumentError: If *text* is not a string or *count* is not a
            non-negative integer.
    """
    require(isinstance(text, str), f"invalid string: {text!r}")
    require(_is_count(count), f"invalid number of spaces: {count!r}")
    return f"{' ' * count}{text}"


def compute_label(name: str, indented: bool = False) -> str:
    """Return the display label for the test called *name*.

    Tests that belong to a registered batch are indented under the
    "Testing all..." banner.
    """
    return f"{INDENT if indented else ''}Testing {name}...  "


# ============================================================================
#                               Execution
# ============================================================================


class State(Enum):
    """Lifecycle of a single test execution."""

    NOT_STARTED = "not-started"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class Execution:
    """One test run and the hooks around it.

    Attributes:
        body: The test itself; returning normally means it passed.
        on_start: Called before the body, typically to print the label.
        on_finish: Called after a passing body, typically to print the marker.
        failure_indent: Spaces written before the failure report so it lines
            up with the markers of passing tests.
        state: Current lifecycle state, updated by `execute`.
    """

    body: Body
    on_start: Callable[[], None] | None = None
    on_finish: Callable[[], None] | None = None
    failure_indent: int = 0
    state: State = State.NOT_STARTED

    def validate(self) -> None:
        """Raise InvalidArgumentError if a field holds the wrong kind of value."""
        require(callable(self.body), f"invalid body: {self.body!r}")
        require(
            self.on_start is None or callable(self.on_start),
            f"invalid on_start: {self.on_start!r}",
        )
        require(
            self.on_finish is None or callable(self.on_finish),
            f"invalid on_finish: {self.on_finish!r}",
        )
        require(
            _is_count(self.failure_indent),
            f"invalid failure_indent: {self.failure_indent!r}",
        )


def format_error(error: BaseException) -> str:
    """Return the full traceback of *error* as text."""
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip()


def execute(execution: Execution, *, color: bool | None = None) -> State:
    """Run *execution* inside `guard`.

    A failing body writes the failure indent, then the guard prints a
    ``FAILED`` report with the body's traceback and exits with status 1.

    Returns:
        `State.PASSED` when the body returned normally.
    """

    def task() -> State:
        execution.validate()

        if execution.on_start:
            execution.on_start()

        execution.state = State.RUNNING
        try:
            execution.body()
        except FatalExit:
            raise
        except (Exception, SystemExit) as error:  # pylint: disable=broad-except
            execution.state = State.FAILED
            logger.debug("Test body raised %s", type(error).__name__)
            write(pad_left("", execution.failure_indent), color=color)
            raise TestFailedError(format_error(error)) from error

        execution.state = State.PASSED
        if execution.on_finish:
            execution.on_finish()
        return execution.state

    return guard(task, color=color)


def reverse(name: str, body: Body) -> Body:
    """Wrap *body* so it passes only if the original raises.

    Raises:
        InvalidArgumentError: If *name* is not a string or *body* is not callable.
    """
    require(isinstance(name, str), f"invalid name: {name!r}")
    require(callable(body), f"invalid body: {body!r}")

    @functools.wraps(body)
    def reversed_body() -> None:
        try:
            body()
        except FatalExit:
            raise
        except (Exception, SystemExit):  # pylint: disable=broad-except
            return
        raise DidNotThrowError(name)

    return reversed_body
