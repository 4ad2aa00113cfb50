"""Configuration management for knowledge-docgen."""
from .docgen import (
    DocgenConfig,
    ScanConfig,
    OutputConfig,
    LoggingConfig,
    load_docgen_config,
)

__all__ = [
    "DocgenConfig",
    "ScanConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_docgen_config",
]
