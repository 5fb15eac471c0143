"""Exceptions raised by truenit.

Every error a public entry point can raise derives from `TruenitError`. The
guard boundary (see `truenit.utils.guard`) turns any of them into red
terminal output and exit status 1.
"""

# ============================================================================
#                           General errors
# ============================================================================


class TruenitError(Exception):
    """Base class for truenit errors."""


class InvalidArgumentError(TruenitError, ValueError):
    """Raised when an operation receives a wrong-typed or out-of-range argument."""


# ============================================================================
#                           Assertion errors
# ============================================================================


class AssertionFailure(TruenitError, AssertionError):
    """Raised when a predicate checked by an assertion helper does not hold."""


class DidNotThrowError(AssertionFailure):
    """Raised when a test expected to throw returned normally."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} test did not throw.")
        self.name = name


class TestFailedError(AssertionFailure):
    """Raised by the executor after a test body failed.

    The message carries the formatted traceback of the original error so the
    guard can print it verbatim.
    """

    __test__ = False

    def __init__(self, details: str) -> None:
        super().__init__(f"FAILED \n\n{details}\n\n")
        self.details = details


# ============================================================================
#                           Registry errors
# ============================================================================


class TestNotFoundError(TruenitError, LookupError):
    """Raised when removing a (name, body) pair that is not registered."""

    __test__ = False

    def __init__(self, name: str) -> None:
        super().__init__(f"test was not found: {name!r}")
        self.name = name
