"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from ..config import ThriftgenConfig, load_config
from ..errors import ConfigError
from ..output import OutputContext

# Exit codes
EXIT_FAILED = 1  # one or more schemas failed to compile
EXIT_FATAL = 2  # run aborted before compiling anything


def project_option() -> Path:
    return typer.Option(
        Path("."),
        "--project",
        "-p",
        help="Project directory containing thriftgen.toml",
        file_okay=False,
        resolve_path=True,
    )


def load_project_config(ctx: OutputContext, project: Path) -> ThriftgenConfig:
    """Load config or exit with EXIT_FATAL."""
    try:
        return load_config(project)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_FATAL) from None
