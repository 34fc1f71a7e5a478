"""Compile command implementation."""

from pathlib import Path

import typer

from ..core import compile_schemas
from ..errors import ExecutableNotFoundError, VersionError
from ..models import RunStatus
from ..output import get_output_context
from ._common import EXIT_FAILED, EXIT_FATAL, load_project_config, project_option


def compile_cmd(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Compile regardless of modification times",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show which schemas would be compiled without running thrift",
    ),
    project: Path = project_option(),
) -> None:
    """Generate sources from stale .thrift schema files."""
    ctx = get_output_context()
    config = load_project_config(ctx, project).thrift

    try:
        summary = compile_schemas(config, force=force, dry_run=dry_run)
    except (ExecutableNotFoundError, VersionError) as e:
        ctx.error(str(e), {"status": "aborted"})
        raise typer.Exit(EXIT_FATAL) from None

    ctx.print_json(summary.to_dict())

    if summary.status == RunStatus.NOOP:
        ctx.print("Nothing to compile, all schemas are up to date")
        return

    if summary.status == RunStatus.PLANNED:
        ctx.print("[cyan][DRY RUN][/cyan] Would compile:")
        for schema in summary.stale_files:
            ctx.print(f"  {schema}")
        return

    if summary.failed:
        ctx.print(
            f"[red]{len(summary.failed)} of {len(summary.results)} schema(s) failed[/red]"
        )
        raise typer.Exit(EXIT_FAILED)

    ctx.success(f"Compiled {len(summary.compiled)} schema(s)")
