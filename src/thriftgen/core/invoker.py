"""Compile a single schema file."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..errors import ProcessError
from ..models import InvocationResult
from ..services.process import ProcessRunner

logger = logging.getLogger(__name__)


def invoke(
    executable: str,
    plan: Sequence[str],
    schema_path: Path,
    runner: ProcessRunner,
) -> InvocationResult:
    """Run thrift on one schema and report the outcome.

    A non-zero exit is reported and returned, never raised, so the rest of
    the work list still gets compiled. A process that cannot complete is
    recorded with exit code -1.
    """
    args = [*plan, str(schema_path)]
    try:
        result = runner.run(executable, args)
        exit_code, output = result.exit_code, result.output
    except ProcessError as e:
        exit_code, output = -1, str(e)

    if exit_code == 0:
        logger.info(f"Compiled {schema_path}")
    else:
        logger.error(f"Failed to compile {schema_path} (error {exit_code})")
        if output.strip():
            logger.debug(output.rstrip())

    return InvocationResult(schema_file=schema_path, exit_code=exit_code, output=output, args=args)
