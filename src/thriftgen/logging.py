"""Logging configuration for the thriftgen CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> int:
    """Map CLI flags to a log level.

    Precedence is quiet > debug > verbosity. Per-file compile reports are
    logged at INFO, so quiet mode keeps only failures.
    """
    if quiet:
        return logging.WARNING
    if debug or verbosity >= 1:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    debug: bool = False,
) -> Console:
    """Configure logging based on CLI options.

    Args:
        verbosity: Number of -v flags (0=normal, 1+=debug)
        quiet: Only report errors
        no_color: Disable colored output
        debug: Enable debug logging with timestamps and source paths

    Returns:
        Configured Rich console for output
    """
    console = Console(
        stderr=True,
        force_terminal=not no_color,
        no_color=no_color,
    )

    detailed = debug or verbosity >= 2
    handler = RichHandler(
        console=console,
        show_time=detailed,
        show_path=detailed,
    )

    logging.basicConfig(
        level=resolve_level(verbosity, quiet, debug),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
