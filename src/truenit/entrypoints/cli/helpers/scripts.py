"""Run a test script the way ``python SCRIPT`` would."""

import logging
import runpy
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def run_script(path: Path) -> None:
    """Execute *path* as ``__main__``.

    ``sys.argv`` is set to ``[path]`` and the script's directory is put first
    on ``sys.path`` for the duration of the run, then both are restored.
    Exceptions raised by the script propagate.
    """
    path = Path(path)
    logger.debug("Running script %s", path)

    saved_argv, saved_path = sys.argv, list(sys.path)
    sys.argv = [str(path)]
    sys.path.insert(0, str(path.resolve().parent))
    try:
        runpy.run_path(str(path), run_name="__main__")
    finally:
        sys.argv = saved_argv
        sys.path[:] = saved_path
