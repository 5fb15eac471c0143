"""truenit

A minimal unit-testing micro-framework. Register named test functions (or
run ad-hoc ones inline), execute them in order, and get aligned pass/fail
output on the terminal. The first failure prints its traceback and ends the
process with a non-zero exit status.

Example:
    ```py
    import truenit

    truenit.register("addition", lambda: truenit.ok(1 + 1 == 2))
    truenit.run_all()
    ```
"""

import logging as _stdlib_logging

from .assertions import assert_approx, assert_array_approx, assert_equal, not_ok, ok
from .runner import Truenit

__all__ = [
    "__version__",
    "Truenit",
    "default_runner",
    "register",
    "register_throwing",
    "remove",
    "clear",
    "run_all",
    "run_one",
    "throws",
    "ok",
    "not_ok",
    "assert_equal",
    "assert_approx",
    "assert_array_approx",
]
__version__ = "0.1.0"

_stdlib_logging.getLogger(__name__).addHandler(_stdlib_logging.NullHandler())

default_runner = Truenit()

register = default_runner.register
register_throwing = default_runner.register_throwing
remove = default_runner.remove
clear = default_runner.clear
run_all = default_runner.run_all
run_one = default_runner.run_one
throws = default_runner.throws
