"""CLI helpers for truenit.

Utilities used by the command-line interface: parsing of ``NAME=LEVEL``
logger options and running test scripts as ``__main__``.
"""

from .log_level_parser import parse_log_level
from .scripts import run_script

__all__ = ["parse_log_level", "run_script"]
