"""Filesystem lookups for generated files."""

import re
from collections.abc import Callable
from pathlib import Path

FileFinder = Callable[[Path, str], list[Path]]

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style brace alternatives into plain glob patterns.

    Example:
        >>> expand_braces("a_{x,y}.{erl,hrl}")
        ['a_x.erl', 'a_x.hrl', 'a_y.erl', 'a_y.hrl']
    """
    match = _BRACE_RE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def find_files(directory: Path, pattern: str) -> list[Path]:
    """Find files directly inside directory matching a brace/glob pattern.

    The search is flat: thrift writes generated files straight into its
    --out directory. A missing directory yields no matches.

    Args:
        directory: Directory to search
        pattern: Glob pattern, may contain {a,b} alternatives

    Returns:
        Sorted, de-duplicated list of matching regular files
    """
    if not directory.is_dir():
        return []
    matches: set[Path] = set()
    for glob in expand_braces(pattern):
        matches.update(p for p in directory.glob(glob) if p.is_file())
    return sorted(matches)
