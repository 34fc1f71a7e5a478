"""Init command implementation."""

from pathlib import Path

from ..config import write_config_template
from ..constants import CONFIG_FILENAME
from ..output import get_output_context
from ._common import project_option


def init(project: Path = project_option()) -> None:
    """Create a thriftgen.toml template in the project directory."""
    ctx = get_output_context()
    config_path = project / CONFIG_FILENAME

    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        ctx.print_json({"config": str(config_path), "created": False})
        return

    project.mkdir(parents=True, exist_ok=True)
    write_config_template(project)
    ctx.print(f"[green]Created config template:[/green] {config_path}")
    ctx.print_json({"config": str(config_path), "created": True})
