"""Thrift version gate.

Requirements may be written in either of two styles:

* Elixir/Ruby style, as used by Mix projects: ``~> 0.10``,
  ``>= 0.9.0 and < 1.0.0``, ``== 0.10.0 or == 0.11.0``
* PEP 440 specifiers: ``>=0.9,<1.0``, ``~=0.10``

``~> X.Y`` allows anything from X.Y.0 up to the next major version;
``~> X.Y.Z`` allows anything from X.Y.Z up to the next minor version.
"""

import logging
import re

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from ..constants import VERSION_FLAG, VERSION_TIMEOUT
from ..errors import (
    InvalidRequirementError,
    ProcessError,
    UnsupportedVersionError,
    VersionCommandError,
    VersionParseError,
)
from ..services.process import ProcessRunner

logger = logging.getLogger(__name__)

VERSION_RE = re.compile(r"\b(\d+\.\d+\.\d+)\b")
_CLAUSE_RE = re.compile(r"^(~>|~=|==|!=|>=|<=|>|<)?\s*([0-9][0-9A-Za-z.\-+*]*)$")
_OR_RE = re.compile(r"\s+or\s+")
_AND_RE = re.compile(r"\s+and\s+")


def extract_version(output: str) -> str:
    """Return the first x.y.z version number in output.

    Raises:
        VersionParseError: If output contains no x.y.z version
    """
    match = VERSION_RE.search(output)
    if match is None:
        raise VersionParseError(output)
    return match.group(1)


def _pessimistic(version: str, requirement: str) -> list[str]:
    parts = version.split(".")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise InvalidRequirementError(requirement, f"`~> {version}` needs x.y or x.y.z")
    numbers = [int(p) for p in parts]
    if len(numbers) == 2:
        upper = f"{numbers[0] + 1}.0.0"
    else:
        upper = f"{numbers[0]}.{numbers[1] + 1}.0"
    return [f">={version}", f"<{upper}"]


def _parse_alternative(alternative: str, requirement: str) -> SpecifierSet:
    if "," in alternative and not _AND_RE.search(alternative):
        clauses = alternative.split(",")
    else:
        clauses = _AND_RE.split(alternative)

    specs: list[str] = []
    for clause in clauses:
        match = _CLAUSE_RE.match(clause.strip())
        if match is None:
            raise InvalidRequirementError(requirement, f"cannot parse {clause.strip()!r}")
        op, version = match.group(1) or "==", match.group(2)
        if op == "~>":
            specs.extend(_pessimistic(version, requirement))
        else:
            specs.append(f"{op}{version}")

    try:
        return SpecifierSet(",".join(specs))
    except InvalidSpecifier as e:
        raise InvalidRequirementError(requirement, str(e)) from e


def parse_requirement(requirement: str) -> list[SpecifierSet]:
    """Parse a requirement into alternatives, any one of which must match.

    Raises:
        InvalidRequirementError: If the requirement is empty or malformed
    """
    requirement_text = requirement.strip()
    if not requirement_text:
        raise InvalidRequirementError(requirement, "empty requirement")
    return [_parse_alternative(alt.strip(), requirement) for alt in _OR_RE.split(requirement_text)]


def version_matches(version: str, requirement: str) -> bool:
    """Return True if version satisfies requirement."""
    alternatives = parse_requirement(requirement)
    try:
        parsed = Version(version)
    except InvalidVersion as e:
        raise VersionParseError(version) from e
    return any(spec.contains(parsed, prereleases=True) for spec in alternatives)


def get_thrift_version(executable: str, runner: ProcessRunner) -> str:
    """Run ``<executable> -version`` and return the reported version.

    Raises:
        VersionCommandError: If the command fails or cannot be run
        VersionParseError: If the output has no x.y.z version
    """
    try:
        result = runner.run(executable, [VERSION_FLAG], timeout=VERSION_TIMEOUT)
    except ProcessError as e:
        raise VersionCommandError(executable, -1) from e
    if result.exit_code != 0:
        raise VersionCommandError(executable, result.exit_code)
    return extract_version(result.output)


def check_version(executable: str, requirement: str, runner: ProcessRunner) -> str:
    """Check the thrift version against requirement.

    The requirement is parsed before thrift is run so configuration errors
    surface without spawning a process.

    Returns:
        The detected thrift version

    Raises:
        InvalidRequirementError: If requirement is malformed
        VersionCommandError: If ``-version`` fails
        VersionParseError: If no version can be found in its output
        UnsupportedVersionError: If the version does not satisfy requirement
    """
    parse_requirement(requirement)
    version = get_thrift_version(executable, runner)
    logger.debug(f"Found thrift {version} (requires {requirement})")
    if not version_matches(version, requirement):
        raise UnsupportedVersionError(version, requirement)
    return version
