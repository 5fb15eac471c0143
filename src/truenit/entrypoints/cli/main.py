"""truenit CLI entry point.

Defines the ``truenit`` command (via Click-Extra), which runs one or more
Python test scripts in order against the default runner.

Notes
- Each script starts with an empty registry, so a script's `run_all` only
  sees the tests that script registered.
- The first failure ends the whole invocation with exit status 1; later
  scripts are not run.
- Log output goes to stderr; test output stays on stdout.

Examples
    $ truenit --version
    $ truenit tests/test_math.py tests/test_strings.py
    $ truenit -vv -L truenit.registry=WARNING tests/test_math.py
    $ truenit --log-path truenit.log tests/test_math.py
"""

import functools
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from truenit import __version__, default_runner
from truenit.logging import (
    FlightRecorder,
    config_console_handler,
    log_startup,
    running_script,
)
from truenit.utils import FatalExit, guard

from .helpers import parse_log_level, run_script

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """Run truenit test scripts.

    Each SCRIPT is executed as ``__main__`` with a freshly cleared registry. Scripts
    register tests and call ``truenit.run_all()`` (or run ad-hoc tests inline); the
    first failing test stops everything with exit status 1.
    """


@clickx.extra_command(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console logging with source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=(
        "Enable the flight recorder: keep each script's DEBUG records in memory "
        "and write them to this file when it fails or the run ends."
    ),
    default=None,
    envvar="TRUENIT_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L truenit.registry=INFO -L truenit.runner=DEBUG) or via "
        "TRUENIT_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="TRUENIT_LOGGER_LEVELS",
    show_envvar=True,
)
@click.argument(
    "scripts",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@clickx.pass_context
def truenit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    logger_levels: dict[str, int],
    scripts: tuple[Path, ...],
) -> None:
    """Run truenit test scripts."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    recorder: FlightRecorder | None = None
    if log_path:
        recorder = FlightRecorder(log_path)
        handlers.append(recorder)

    # 3) configure root logger with configured handlers
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        log_path=log_path,
        logger_levels=logger_levels,
        scripts=scripts,
    )

    # 5) ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)

    # 6) run every script; a failure exits from inside the guard
    for script in scripts:
        if recorder:
            recorder.start_script(script)
        with running_script(script):
            logger.info("Running %s", script)
            default_runner.clear()
            try:
                guard(
                    functools.partial(run_script, script), color=default_runner.color
                )
            except FatalExit:
                logger.error("%s failed, skipping the remaining scripts", script.name)
                raise
