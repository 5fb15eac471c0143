"""Global pytest fixtures for truenit."""

import pytest

import truenit
from truenit import Truenit


@pytest.fixture
def runner() -> Truenit:
    """A fresh runner with its own registry and ANSI styling disabled."""
    return Truenit(color=False)


@pytest.fixture(autouse=True)
def clean_default_runner():
    """Keep the module-level default registry empty between tests."""
    truenit.default_runner.clear()
    yield
    truenit.default_runner.clear()
