"""CLI command implementations for thriftgen.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .compile import compile_cmd
from .init import init
from .status import status

__all__ = [
    "compile_cmd",
    "init",
    "status",
]
