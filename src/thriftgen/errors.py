"""Errors raised by thriftgen."""


class ThriftgenError(Exception):
    """Base exception for thriftgen errors."""


class ConfigError(ThriftgenError):
    """Raised when thriftgen.toml cannot be read or validated."""


class ProcessError(ThriftgenError):
    """Raised when an external process cannot be run to completion."""


class ExecutableNotFoundError(ThriftgenError):
    """Raised when the thrift executable is not on the search path."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"`{executable}` not found in the current path")


class VersionError(ThriftgenError):
    """Base exception for version gate failures."""


class VersionCommandError(VersionError):
    """Raised when `<thrift> -version` exits non-zero."""

    def __init__(self, executable: str, exit_code: int) -> None:
        self.executable = executable
        self.exit_code = exit_code
        super().__init__(f"Failed to execute `{executable} -version` (error {exit_code})")


class VersionParseError(VersionError):
    """Raised when no x.y.z version can be found in the version output."""

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(f"Could not find a version number in: {output.strip()!r}")


class InvalidRequirementError(VersionError):
    """Raised when the configured version requirement cannot be parsed."""

    def __init__(self, requirement: str, reason: str = "") -> None:
        self.requirement = requirement
        message = f"Invalid version requirement {requirement!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnsupportedVersionError(VersionError):
    """Raised when the thrift version does not satisfy the requirement."""

    def __init__(self, version: str, requirement: str) -> None:
        self.version = version
        self.requirement = requirement
        super().__init__(f"Unsupported Thrift version {version} (requires {requirement})")
