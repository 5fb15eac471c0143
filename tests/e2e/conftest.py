"""Fixtures and default marks for end-to-end CLI tests.

Provides a CliRunner, a helper that writes test scripts to a temporary
directory, and restores the root logger after each test since the CLI
reconfigures logging.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name, unused-argument

E2E_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        path = item.path.resolve()
        if E2E_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.e2e)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CliRunner for invoking the CLI in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way it was after the CLI reconfigures it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("truenit", "truenit.registry", "truenit.runner"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def write_script(tmp_path: Path):
    """Return a function that writes *source* to ``tmp_path/<name>`` and returns its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
