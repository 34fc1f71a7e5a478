"""Staleness check for schema files."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..constants import ARTIFACT_EXTENSIONS, ARTIFACT_SUFFIXES
from ..services.filesystem import FileFinder, find_files
from .artifacts import resolve_artifacts

logger = logging.getLogger(__name__)


def is_newer_than_artifacts(schema_path: Path, artifacts: Sequence[Path]) -> bool:
    """Return True if schema_path needs regenerating given its existing artifacts.

    No artifacts, or a missing schema, means stale. Otherwise the schema is
    stale only when modified strictly after the newest artifact; equal
    timestamps count as up to date.
    """
    if not schema_path.exists():
        # Let thrift report the missing input
        logger.debug(f"{schema_path} does not exist")
        return True

    if not artifacts:
        logger.debug(f"{schema_path}: no generated files")
        return True

    newest = max(a.stat().st_mtime_ns for a in artifacts)
    stale = schema_path.stat().st_mtime_ns > newest
    logger.debug(f"{schema_path}: {'stale' if stale else 'up to date'} ({len(artifacts)} files)")
    return stale


def is_stale(
    schema_path: Path,
    output_dir: Path,
    force: bool = False,
    suffixes: Sequence[str] = ARTIFACT_SUFFIXES,
    extensions: Sequence[str] = ARTIFACT_EXTENSIONS,
    finder: FileFinder = find_files,
) -> bool:
    """Return True if a schema needs to be regenerated.

    A schema is stale when forced, when none of its generated files exist,
    or when it was modified after the newest generated file.
    """
    if force:
        return True

    targets = resolve_artifacts(schema_path, output_dir, suffixes, extensions, finder)
    return is_newer_than_artifacts(schema_path, targets)
