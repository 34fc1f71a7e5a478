"""Status command: report staleness without running thrift."""

from pathlib import Path

from ..core import is_newer_than_artifacts, resolve_artifacts, unique_schemas
from ..output import get_output_context
from ._common import load_project_config, project_option


def status(project: Path = project_option()) -> None:
    """Show each configured schema and whether it needs compiling."""
    ctx = get_output_context()
    config = load_project_config(ctx, project).thrift

    entries = []
    for schema in unique_schemas(config.files):
        artifacts = resolve_artifacts(
            schema, config.output, config.artifact_suffixes, config.artifact_extensions
        )
        entries.append(
            {
                "file": str(schema),
                "stale": is_newer_than_artifacts(schema, artifacts),
                "artifacts": [str(a) for a in artifacts],
            }
        )

    ctx.print_json({"output": str(config.output), "schemas": entries})

    if not entries:
        ctx.print("No schema files configured")
        return

    ctx.print(f"[bold]Output:[/bold] {config.output}")
    for entry in entries:
        label = "[yellow]stale[/yellow]" if entry["stale"] else "[green]up to date[/green]"
        ctx.print(f"  {entry['file']}: {label} ({len(entry['artifacts'])} generated files)")
