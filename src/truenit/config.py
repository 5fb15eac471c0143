"""Configuration constants and environment helpers for truenit.

Output layout constants live here so the runner and the formatting helpers
agree on them. Colour can be steered per process with ``TRUENIT_COLOR``
(``always``, ``never`` or ``auto``); the ``NO_COLOR`` convention is honoured
when ``TRUENIT_COLOR`` is unset.
"""

import os

INDENT = "   "
PASSED_MARKER = "Passed.\n"
START_BANNER = "Testing all...\n\n"
FINISH_BANNER = "All tests passed!\n\n"
DEFAULT_MESSAGE = "Assertion failed."
DEFAULT_TEST_MESSAGE = "unit test failed."
DEFAULT_EPSILON = 1e-6
EXIT_FAILURE = 1

COLOR_ENV_VAR = "TRUENIT_COLOR"  # pragma: no mutate
NO_COLOR_ENV_VAR = "NO_COLOR"  # pragma: no mutate

_COLOR_CHOICES = {"always": True, "never": False, "auto": None}


class InvalidColorSettingError(ValueError):
    """Raised when TRUENIT_COLOR holds an unrecognised value."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid {COLOR_ENV_VAR} value {value!r}; "
            f"expected one of {', '.join(_COLOR_CHOICES)}."
        )
        self.value = value


def get_color_preference() -> bool | None:
    """Resolve the colour preference from the environment.

    Returns:
        True to force ANSI styling, False to strip it, or None to let Click
        decide from the output stream (styling only on a terminal).

    Raises:
        InvalidColorSettingError: If `TRUENIT_COLOR` is set to an unknown value.
    """
    if value := os.environ.get(COLOR_ENV_VAR, "").strip().lower():
        try:
            return _COLOR_CHOICES[value]
        except KeyError as e:
            raise InvalidColorSettingError(value) from e
    if os.environ.get(NO_COLOR_ENV_VAR):
        return False
    return None
