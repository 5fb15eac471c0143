"""Unit tests for :mod:`truenit.config`."""

import pytest

from truenit.config import (
    COLOR_ENV_VAR,
    NO_COLOR_ENV_VAR,
    InvalidColorSettingError,
    get_color_preference,
)


@pytest.fixture(autouse=True)
def clear_color_env(monkeypatch):
    """Start every test without colour settings in the environment."""
    monkeypatch.delenv(COLOR_ENV_VAR, raising=False)
    monkeypatch.delenv(NO_COLOR_ENV_VAR, raising=False)


def test_default_is_auto() -> None:
    """Without settings, Click decides from the stream."""
    assert get_color_preference() is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [("always", True), ("never", False), ("auto", None), ("  ALWAYS ", True)],
)
def test_truenit_color_values(monkeypatch, value, expected) -> None:
    """TRUENIT_COLOR is parsed case-insensitively."""
    monkeypatch.setenv(COLOR_ENV_VAR, value)
    assert get_color_preference() is expected


def test_no_color_disables_styling(monkeypatch) -> None:
    """NO_COLOR turns styling off when TRUENIT_COLOR is unset."""
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    assert get_color_preference() is False


def test_truenit_color_wins_over_no_color(monkeypatch) -> None:
    """An explicit TRUENIT_COLOR overrides NO_COLOR."""
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    monkeypatch.setenv(COLOR_ENV_VAR, "always")
    assert get_color_preference() is True


def test_invalid_value_raises(monkeypatch) -> None:
    """Unknown values are rejected with the offending value attached."""
    monkeypatch.setenv(COLOR_ENV_VAR, "sometimes")
    with pytest.raises(InvalidColorSettingError) as exc_info:
        get_color_preference()
    assert exc_info.value.value == "sometimes"
    assert "sometimes" in str(exc_info.value)
