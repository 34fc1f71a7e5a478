"""Shared test fixtures for thriftgen tests."""

import os
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from thriftgen.config import ThriftConfig
from thriftgen.services.process import ProcessResult

FAKE_THRIFT = """#!/bin/sh
if [ "$1" = "-version" ]; then
    echo "Thrift version ${FAKE_THRIFT_VERSION:-0.10.0}"
    exit 0
fi
out="$2"
for last; do :; done
echo "$@" >> "$out/.calls"
base=$(basename "$last" .thrift)
case "$base" in
    bad*) echo "[ERROR] $last: syntax error" >&2; exit 3 ;;
esac
touch "$out/${base}_types.erl" "$out/${base}_types.hrl"
"""


class FakeRunner:
    """ProcessRunner that records calls instead of spawning processes."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.version_output = "Thrift version 0.10.0\n"
        self.version_exit_code = 0
        self.exit_codes: dict[str, int] = {}  # schema file name -> exit code
        self.timeouts: list[int | None] = []

    def run(
        self, executable: str, args: list[str], timeout: int | None = None
    ) -> ProcessResult:
        self.calls.append((executable, list(args)))
        self.timeouts.append(timeout)
        if args == ["-version"]:
            return ProcessResult(output=self.version_output, exit_code=self.version_exit_code)
        code = self.exit_codes.get(Path(args[-1]).name, 0)
        return ProcessResult(output="" if code == 0 else "syntax error\n", exit_code=code)

    @property
    def compile_calls(self) -> list[list[str]]:
        return [args for _, args in self.calls if args != ["-version"]]

    @property
    def version_calls(self) -> int:
        return sum(1 for _, args in self.calls if args == ["-version"])


def set_mtime(path: Path, seconds: int) -> None:
    """Set both atime and mtime of path to an exact whole second."""
    os.utime(path, (seconds, seconds))


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a recording ProcessRunner."""
    return FakeRunner()


@pytest.fixture
def mtime():
    """Return the set_mtime helper."""
    return set_mtime


@pytest.fixture
def schema_project(tmp_path: Path) -> ThriftConfig:
    """Create two schema files and a config pointing at them.

    The output directory is not created.
    """
    schema_dir = tmp_path / "thrift"
    schema_dir.mkdir()
    for name in ("user", "account"):
        schema = schema_dir / f"{name}.thrift"
        schema.write_text(f"struct {name.title()} {{ 1: i32 id }}\n")
        set_mtime(schema, 1_000_000)
    return ThriftConfig(
        files=[schema_dir / "user.thrift", schema_dir / "account.thrift"],
        output=tmp_path / "src",
    )


@pytest.fixture
def fake_thrift(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Install a shell-script `thrift` at the front of PATH.

    The script reports version $FAKE_THRIFT_VERSION (default 0.10.0), fails
    with exit code 3 for schemas named bad*, and otherwise touches
    <base>_types.erl and <base>_types.hrl in the --out directory.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "thrift"
    script.write_text(FAKE_THRIFT)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return script


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project with thriftgen.toml and two schema files."""
    project = tmp_path / "project"
    (project / "thrift").mkdir(parents=True)
    for name in ("user", "account"):
        schema = project / "thrift" / f"{name}.thrift"
        schema.write_text(f"struct {name.title()} {{ 1: i32 id }}\n")
        set_mtime(schema, 1_000_000)
    (project / "thriftgen.toml").write_text(
        """[thrift]
files = ["thrift/user.thrift", "thrift/account.thrift"]
output = "src"
"""
    )
    return project
