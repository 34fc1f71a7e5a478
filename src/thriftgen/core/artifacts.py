"""Mapping from a schema file to the files thrift generates for it."""

from collections.abc import Sequence
from pathlib import Path

from ..constants import ARTIFACT_EXTENSIONS, ARTIFACT_SUFFIXES, SCHEMA_EXTENSION
from ..services.filesystem import FileFinder, find_files


def schema_basename(schema_path: Path) -> str:
    """Return the schema file name without its extension."""
    name = schema_path.name
    if name.endswith(SCHEMA_EXTENSION):
        return name[: -len(SCHEMA_EXTENSION)]
    return schema_path.stem


def artifact_pattern(
    basename: str,
    suffixes: Sequence[str] = ARTIFACT_SUFFIXES,
    extensions: Sequence[str] = ARTIFACT_EXTENSIONS,
) -> str:
    """Build the brace pattern for generated files, e.g. ``foo_{constants,types}.{erl,hrl}``."""
    return f"{basename}_{{{','.join(suffixes)}}}.{{{','.join(extensions)}}}"


def resolve_artifacts(
    schema_path: Path,
    output_dir: Path,
    suffixes: Sequence[str] = ARTIFACT_SUFFIXES,
    extensions: Sequence[str] = ARTIFACT_EXTENSIONS,
    finder: FileFinder = find_files,
) -> list[Path]:
    """Find the generated files that exist for a schema.

    Args:
        schema_path: Path to the .thrift file
        output_dir: Directory thrift writes generated files into
        suffixes: Logical suffixes thrift appends to the basename
        extensions: File extensions of generated files
        finder: File lookup capability

    Returns:
        Existing generated files, possibly empty
    """
    pattern = artifact_pattern(schema_basename(schema_path), suffixes, extensions)
    return finder(output_dir, pattern)
