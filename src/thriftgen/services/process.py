"""Process execution for thriftgen."""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..constants import THRIFT_TIMEOUT
from ..errors import ProcessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Combined output and exit code of a finished process."""

    output: str
    exit_code: int


class ProcessRunner(Protocol):
    """Runs an executable with arguments and waits for it to exit."""

    def run(
        self, executable: str, args: list[str], timeout: int | None = None
    ) -> ProcessResult: ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run."""

    def __init__(self, cwd: Path | None = None, timeout: int | None = None) -> None:
        self.cwd = cwd
        self.timeout = THRIFT_TIMEOUT if timeout is None else timeout

    def run(
        self, executable: str, args: list[str], timeout: int | None = None
    ) -> ProcessResult:
        """Run executable and return its combined stdout/stderr and exit code.

        Output is decoded as UTF-8; undecodable bytes are replaced.

        Args:
            executable: Program to run
            args: Arguments passed to it
            timeout: Seconds to wait (default: the runner's timeout)

        Raises:
            ProcessError: If the process times out or cannot be started
        """
        timeout = self.timeout if timeout is None else timeout
        cmd = [executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessError(f"`{executable}` timed out after {timeout} seconds") from e
        except FileNotFoundError:
            raise ProcessError(f"Command not found: {executable}") from None
        except OSError as e:
            raise ProcessError(f"Failed to run `{executable}`: {e}") from e
        return ProcessResult(output=result.stdout, exit_code=result.returncode)


def find_executable(name: str) -> str | None:
    """Locate an executable on PATH, returning its full path or None."""
    return shutil.which(name)
