"""Core compile logic for thriftgen.

This package decides what to compile and how to invoke thrift. All process
and filesystem access goes through injectable capabilities:
- artifacts: map a schema file to its generated files
- staleness: decide whether a schema needs regenerating
- version_gate: check the thrift version against a requirement
- arguments: build the shared compiler argument list
- invoker: compile one schema file
- orchestrator: sequence a whole compile run
"""

from .arguments import build_args, has_generator_flag
from .artifacts import artifact_pattern, resolve_artifacts, schema_basename
from .invoker import invoke
from .orchestrator import compile_schemas, select_stale, unique_schemas
from .staleness import is_newer_than_artifacts, is_stale
from .version_gate import (
    check_version,
    extract_version,
    get_thrift_version,
    parse_requirement,
    version_matches,
)

__all__ = [
    "artifact_pattern",
    "build_args",
    "check_version",
    "compile_schemas",
    "extract_version",
    "get_thrift_version",
    "has_generator_flag",
    "invoke",
    "is_newer_than_artifacts",
    "is_stale",
    "parse_requirement",
    "resolve_artifacts",
    "schema_basename",
    "select_stale",
    "unique_schemas",
    "version_matches",
]
