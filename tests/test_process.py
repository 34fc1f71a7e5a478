"""Tests for the subprocess-backed runner."""

from pathlib import Path

import pytest

from thriftgen.constants import THRIFT_TIMEOUT
from thriftgen.errors import ProcessError
from thriftgen.services.process import SubprocessRunner, find_executable


class TestSubprocessRunner:
    """Tests for SubprocessRunner invariants."""

    def test_returns_output_and_exit_code(self, tmp_path: Path) -> None:
        result = SubprocessRunner(cwd=tmp_path).run("sh", ["-c", "echo hello"])
        assert result.exit_code == 0
        assert result.output == "hello\n"

    def test_exit_code_matches_exactly(self, tmp_path: Path) -> None:
        result = SubprocessRunner(cwd=tmp_path).run("sh", ["-c", "exit 42"])
        assert result.exit_code == 42

    def test_stderr_is_combined_with_stdout(self, tmp_path: Path) -> None:
        result = SubprocessRunner(cwd=tmp_path).run("sh", ["-c", "echo out; echo err >&2"])
        assert "out" in result.output
        assert "err" in result.output

    def test_missing_command_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ProcessError, match="Command not found"):
            SubprocessRunner(cwd=tmp_path).run("nonexistent_command_xyz", [])

    def test_timeout_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ProcessError, match="timed out"):
            SubprocessRunner(cwd=tmp_path, timeout=1).run("sleep", ["10"])

    def test_runs_in_working_directory(self, tmp_path: Path) -> None:
        result = SubprocessRunner(cwd=tmp_path).run("pwd", [])
        assert Path(result.output.strip()).resolve() == tmp_path.resolve()


def test_find_executable(fake_thrift: Path) -> None:
    assert find_executable("thrift") == str(fake_thrift)
    assert find_executable("nonexistent_command_xyz") is None


class TestSubprocessRunnerRobustness:
    """Tests for output decoding and failure conversion."""

    def test_undecodable_bytes_are_replaced(self, tmp_path: Path) -> None:
        result = SubprocessRunner(cwd=tmp_path).run(
            "sh", ["-c", "printf '[ERROR] bad byte \\377 here\\n' >&2; exit 1"]
        )

        assert result.exit_code == 1
        assert "[ERROR] bad byte \ufffd here" in result.output

    def test_permission_error_becomes_process_error(self, tmp_path: Path) -> None:
        script = tmp_path / "not-executable"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)

        with pytest.raises(ProcessError, match="Failed to run"):
            SubprocessRunner(cwd=tmp_path).run(str(script), [])

    def test_zero_timeout_is_kept(self) -> None:
        assert SubprocessRunner(timeout=0).timeout == 0

    def test_default_timeout(self) -> None:
        assert SubprocessRunner().timeout == THRIFT_TIMEOUT

    def test_per_call_timeout_overrides_runner_timeout(self, tmp_path: Path) -> None:
        runner = SubprocessRunner(cwd=tmp_path, timeout=300)

        with pytest.raises(ProcessError, match="timed out after 1 seconds"):
            runner.run("sleep", ["10"], timeout=1)
