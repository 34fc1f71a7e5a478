"""Configuration management for thriftgen."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import (
    ARTIFACT_EXTENSIONS,
    ARTIFACT_SUFFIXES,
    CONFIG_FILENAME,
    DEFAULT_EXECUTABLE,
    DEFAULT_GENERATOR,
    DEFAULT_OUTPUT_DIR,
    THRIFT_TIMEOUT,
)
from .errors import ConfigError


class ThriftConfig(BaseModel):
    """Settings for driving the thrift compiler."""

    files: list[Path] = Field(default_factory=list, description="Schema files to compile")
    output: Path = Field(default=Path(DEFAULT_OUTPUT_DIR), description="Output directory")
    options: list[str] = Field(
        default_factory=list, description="Additional options passed to the thrift compiler"
    )
    executable: str = DEFAULT_EXECUTABLE
    version: str | None = Field(default=None, description="Thrift version requirement")
    generator: str = DEFAULT_GENERATOR  # --gen value used unless options set one
    artifact_suffixes: list[str] = Field(default_factory=lambda: list(ARTIFACT_SUFFIXES))
    artifact_extensions: list[str] = Field(default_factory=lambda: list(ARTIFACT_EXTENSIONS))
    timeout: int = Field(default=THRIFT_TIMEOUT, gt=0, description="Per-process timeout")

    def resolve_paths(self, project_dir: Path) -> "ThriftConfig":
        """Return a copy with relative schema and output paths anchored at project_dir."""
        return self.model_copy(
            update={
                "files": [f if f.is_absolute() else project_dir / f for f in self.files],
                "output": self.output if self.output.is_absolute() else project_dir / self.output,
            }
        )


class ThriftgenConfig(BaseModel):
    """Root configuration for thriftgen."""

    thrift: ThriftConfig = Field(default_factory=ThriftConfig)


def load_config(project_dir: Path) -> ThriftgenConfig:
    """Load config from thriftgen.toml.

    Args:
        project_dir: Directory containing thriftgen.toml

    Returns:
        Loaded configuration with paths resolved against project_dir,
        or defaults if thriftgen.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = project_dir / CONFIG_FILENAME
    if not config_path.exists():
        config = ThriftgenConfig()
    else:
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            config = ThriftgenConfig.model_validate(data)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
    config.thrift = config.thrift.resolve_paths(project_dir)
    return config


def write_config_template(project_dir: Path) -> Path:
    """Write default thriftgen.toml template.

    Args:
        project_dir: Directory to write thriftgen.toml into

    Returns:
        Path to the written config file
    """
    config_path = project_dir / CONFIG_FILENAME
    template = {
        "thrift": {
            "files": [],
            "output": DEFAULT_OUTPUT_DIR,
            "options": [],
            "executable": DEFAULT_EXECUTABLE,
            "generator": DEFAULT_GENERATOR,
            "artifact_suffixes": list(ARTIFACT_SUFFIXES),
            "artifact_extensions": list(ARTIFACT_EXTENSIONS),
            "timeout": THRIFT_TIMEOUT,
        },
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
