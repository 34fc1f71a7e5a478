"""External integrations for thriftgen.

This package provides the capabilities the core depends on:
- process: running the thrift executable
- filesystem: locating generated files
"""

from .filesystem import FileFinder, expand_braces, find_files
from .process import ProcessResult, ProcessRunner, SubprocessRunner, find_executable

__all__ = [
    "FileFinder",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "expand_braces",
    "find_executable",
    "find_files",
]
