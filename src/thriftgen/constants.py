"""Constants for thriftgen."""

CONFIG_FILENAME = "thriftgen.toml"

# Defaults for the [thrift] config table
DEFAULT_EXECUTABLE = "thrift"
DEFAULT_OUTPUT_DIR = "src"
DEFAULT_GENERATOR = "erl"
SCHEMA_EXTENSION = ".thrift"

# thrift names generated files <basename>_<suffix>.<ext>
ARTIFACT_SUFFIXES = ("constants", "thrift", "types")
ARTIFACT_EXTENSIONS = ("erl", "hrl")

# Compiler flags
OUT_FLAG = "--out"
GEN_FLAG = "--gen"
VERSION_FLAG = "-version"

# Subprocess timeouts (seconds)
THRIFT_TIMEOUT = 300
VERSION_TIMEOUT = 30
