"""Result models for compile runs."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class InvocationResult(BaseModel):
    """Outcome of compiling one schema file.

    Attributes:
        schema_file: Schema that was passed to the compiler
        exit_code: Compiler exit code (-1 if the process could not complete)
        output: Captured stdout/stderr
        args: Full argument list passed to the compiler
    """

    schema_file: Path
    exit_code: int
    output: str = ""
    args: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class RunStatus(str, Enum):
    """Coarse outcome of a compile run."""

    NOOP = "noop"  # nothing was stale
    RAN = "ran"  # one or more invocations attempted
    PLANNED = "planned"  # dry run with stale files


class RunSummary(BaseModel):
    """Overall outcome of a compile run."""

    status: RunStatus
    stale_files: list[Path] = Field(default_factory=list)
    results: list[InvocationResult] = Field(default_factory=list)
    version: str | None = Field(default=None, description="Thrift version checked by the gate")

    @property
    def compiled(self) -> list[Path]:
        return [r.schema_file for r in self.results if r.succeeded]

    @property
    def failed(self) -> list[Path]:
        return [r.schema_file for r in self.results if not r.succeeded]

    def to_dict(self) -> dict[str, object]:
        """Summary for --json output."""
        return {
            "status": self.status.value,
            "version": self.version,
            "stale": [str(p) for p in self.stale_files],
            "compiled": [str(p) for p in self.compiled],
            "failed": [
                {"file": str(r.schema_file), "exit_code": r.exit_code}
                for r in self.results
                if not r.succeeded
            ],
        }
