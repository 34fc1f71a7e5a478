"""Compile run orchestration.

A run moves through these stages:

1. Resolve the thrift executable on PATH (fatal if missing)
2. Filter configured schemas down to the stale ones
3. Check the thrift version, if a requirement is configured
4. Create the output directory and build the shared arguments
5. Compile each stale schema in order

When nothing is stale the run stops after step 2 with a noop result.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from ..config import ThriftConfig
from ..errors import ExecutableNotFoundError
from ..models import RunStatus, RunSummary
from ..services.filesystem import FileFinder, find_files
from ..services.process import ProcessRunner, SubprocessRunner, find_executable
from .arguments import build_args
from .invoker import invoke
from .staleness import is_stale
from .version_gate import check_version

logger = logging.getLogger(__name__)


def unique_schemas(paths: Iterable[Path]) -> list[Path]:
    """Drop repeated schema paths, keeping the first occurrence."""
    seen: set[Path] = set()
    ordered: list[Path] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            ordered.append(path)
    return ordered


def select_stale(
    config: ThriftConfig,
    force: bool = False,
    finder: FileFinder = find_files,
) -> list[Path]:
    """Return configured schema files that need compiling, in config order."""
    return [
        schema
        for schema in unique_schemas(config.files)
        if is_stale(
            schema,
            config.output,
            force=force,
            suffixes=config.artifact_suffixes,
            extensions=config.artifact_extensions,
            finder=finder,
        )
    ]


def compile_schemas(
    config: ThriftConfig,
    force: bool = False,
    dry_run: bool = False,
    runner: ProcessRunner | None = None,
    finder: FileFinder = find_files,
    which: Callable[[str], str | None] | None = None,
) -> RunSummary:
    """Regenerate sources for every stale schema in config.

    Args:
        config: Thrift settings with paths already resolved
        force: Treat every schema as stale
        dry_run: Stop after working out which schemas are stale
        runner: Process capability (default: subprocess with config.timeout)
        finder: File lookup capability
        which: Executable lookup capability (default: PATH lookup)

    Returns:
        RunSummary with status noop, planned or ran

    Raises:
        ExecutableNotFoundError: If config.executable is not on PATH
        VersionError: If the version gate fails
    """
    executable = (which or find_executable)(config.executable)
    if executable is None:
        raise ExecutableNotFoundError(config.executable)

    stale = select_stale(config, force=force, finder=finder)
    if not stale:
        logger.debug("All schema files are up to date")
        return RunSummary(status=RunStatus.NOOP)

    if dry_run:
        return RunSummary(status=RunStatus.PLANNED, stale_files=stale)

    if runner is None:
        runner = SubprocessRunner(timeout=config.timeout)

    version = None
    if config.version:
        version = check_version(executable, config.version, runner)

    config.output.mkdir(parents=True, exist_ok=True)
    plan = build_args(config.output, config.options, config.generator)

    results = [invoke(executable, plan, schema, runner) for schema in stale]
    return RunSummary(status=RunStatus.RAN, stale_files=stale, results=results, version=version)
