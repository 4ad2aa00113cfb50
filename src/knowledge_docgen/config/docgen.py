"""Docgen configuration loading and validation.

Loads YAML configuration for the knowledge document generator.
"""
from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, field_validator


DEFAULT_CONFIG_PATH = Path("config/docgen.yaml")


class ScanConfig(BaseModel):
    """Directory walk and file routing configuration."""
    source_extensions: list[str] = Field(
        default_factory=lambda: [".go"],
        description="Extensions scanned for annotated enums"
    )
    sql_extensions: list[str] = Field(
        default_factory=lambda: [".sql"],
        description="Extensions scanned for table definitions"
    )
    marker: str = Field("@ai", description="Doc comment tag that opts a declaration in")
    ignore_file: str = Field(".gitignore", description="Ignore file name")
    respect_ignore_file: bool = Field(False, description="Skip paths matched by the ignore file")
    skip_hidden: bool = Field(False, description="Skip dot-files and dot-directories")
    skip_unparsable_sources: bool = Field(
        False,
        description="Log and skip Go files with syntax errors instead of aborting"
    )

    @field_validator("source_extensions", "sql_extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Validate extensions look like '.ext'."""
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"extension must start with '.': {ext!r}")
        return [ext.lower() for ext in v]

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Validate marker is not blank."""
        if not v.strip():
            raise ValueError("marker must not be empty")
        return v.strip()


class OutputConfig(BaseModel):
    """Document output configuration."""
    directory: str = Field("docs", description="Output directory")
    filename_template: str = Field(
        "knowledge_{project}.md",
        description="Output file name, {project} is the scanned directory name"
    )

    @field_validator("filename_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Validate the template references {project}."""
        if "{project}" not in v:
            raise ValueError("filename_template must contain '{project}'")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Log level")
    format: str = Field(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log format"
    )


class DocgenConfig(BaseModel):
    """Complete docgen configuration."""
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> DocgenConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Validated DocgenConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data:
            raise ValueError(f"Empty configuration file: {config_path}")

        try:
            return cls.model_validate(data)
        except Exception as e:
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def from_env(cls, env_var: str = "DOCGEN_CONFIG") -> DocgenConfig:
        """Load configuration from path in environment variable.

        Falls back to config/docgen.yaml, then to defaults.
        """
        config_path = os.getenv(env_var)

        if config_path:
            return cls.from_yaml(config_path)

        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        return cls()


def load_docgen_config(config_path: str | Path | None = None) -> DocgenConfig:
    """Load docgen configuration from file or environment.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Validated DocgenConfig instance

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path:
        return DocgenConfig.from_yaml(config_path)

    return DocgenConfig.from_env()
