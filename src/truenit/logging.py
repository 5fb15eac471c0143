"""Logging helpers used by the truenit CLI.

The library itself only emits records on the ``truenit`` logger hierarchy
(with a `NullHandler` installed by the package). The CLI tracks which script
and which test are running, stamps that onto every record, shows records on
the console with Rich and, when asked, keeps a per-script flight recorder
that is written to disk when something goes wrong or the run ends.

Log output goes to stderr; test output owns stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

_current_script: ContextVar[str | None] = ContextVar("truenit_script", default=None)
_current_test: ContextVar[str | None] = ContextVar("truenit_test", default=None)


@contextmanager
def running_script(path: Path | str) -> Iterator[None]:
    """Mark *path* as the script being run for the duration of the block."""
    token = _current_script.set(Path(path).name)
    try:
        yield
    finally:
        _current_script.reset(token)


@contextmanager
def running_test(name: str) -> Iterator[None]:
    """Mark *name* as the test being run for the duration of the block."""
    token = _current_test.set(name)
    try:
        yield
    finally:
        _current_test.reset(token)


def describe_run() -> str:
    """Return ``"script > test"`` for whatever is running, or ``""``."""
    return " > ".join(
        part for part in (_current_script.get(), _current_test.get()) if part
    )


class RunContextFilter(logging.Filter):
    """Stamp the running script and test onto each record.

    Sets `record.run_context` to a bracketed token like
    ``"[test_math.py > adds] "``, or to an empty string outside any run. The
    filter always returns True.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        where = describe_run()
        record.run_context = f"[{where}] " if where else ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and prefixes each message with the running
    script and test. In debug mode it is set to DEBUG and also shows the
    logger name and source location of each record.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, logger names).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # Keep consistent with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(run_context)s%(name)s: %(message)s"
        if debug_mode
        else "%(run_context)s%(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.addFilter(RunContextFilter())

    return handler


class FlightRecorder(MemoryHandler):
    """In-memory record buffer written to a file, one script at a time.

    Records are kept in memory and flushed to *path* as soon as one at
    *flush_level* or above arrives, and again when the handler is closed.
    `start_script` drops whatever the previous script left unflushed, so a
    passing script costs nothing on disk and the file ends up holding the
    records that led to a failure (or, on a clean run, the last script's).

    Args:
        path: Destination file; truncated when the recorder is created.
        capacity: Number of records buffered before a forced flush.
        flush_level: Level at or above which the buffer is flushed.
    """

    def __init__(
        self,
        path: Path,
        capacity: int = 500,
        flush_level: int = logging.ERROR,
    ) -> None:
        target = logging.FileHandler(path, mode="w", encoding="utf-8")
        target.setLevel(logging.DEBUG)
        target.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s %(run_context)s%(name)s: %(message)s"
            )
        )
        super().__init__(
            capacity=capacity,
            flushLevel=flush_level,
            target=target,
            flushOnClose=True,
        )
        self.path = path
        self.addFilter(RunContextFilter())

    def start_script(self, script: Path) -> None:
        """Forget the previous script's buffered records before *script* runs."""
        with self.lock:
            dropped = len(self.buffer)
            self.buffer.clear()
        logging.getLogger(__name__).debug(
            "Flight recorder armed for %s (dropped %d records)", script, dropped
        )

    def close(self) -> None:
        target = self.target
        super().close()
        if target is not None:
            target.close()


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    log_path: Path | None,
    logger_levels: dict[str, int],
    scripts: tuple[Path, ...],
) -> None:
    """Log a one-line summary and detailed DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Version string to display.
        level: Effective console logging level (numeric).
        log_path: Flight-recorder output file, or None when disabled.
        logger_levels: Mapping of logger names to their configured numeric levels.
        scripts: Test scripts about to be run.
    """
    logger.info(
        "truenit %s: console=%s, flight-recorder=%s, scripts=%d",
        app_version,
        logging.getLevelName(level),
        log_path or "OFF",
        len(scripts),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug("Scripts: %s", [str(script) for script in scripts])
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
