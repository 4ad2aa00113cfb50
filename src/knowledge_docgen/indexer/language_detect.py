"""Language detection by file extension.

Supports: Go (annotated enum scanning) and SQL (schema comments).
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, Literal

Language = Literal["go", "sql", "unknown"]

# Extension to language mapping
EXTENSION_MAP: dict[str, Language] = {
    ".go": "go",
    ".sql": "sql",
}


def build_extension_map(
    source_extensions: Iterable[str] = (".go",),
    sql_extensions: Iterable[str] = (".sql",)
) -> dict[str, Language]:
    """Build an extension map from configured extension lists."""
    ext_map: dict[str, Language] = {}
    for ext in source_extensions:
        ext_map[ext.lower()] = "go"
    for ext in sql_extensions:
        ext_map[ext.lower()] = "sql"
    return ext_map


def detect_language(
    file_path: Path | str,
    extension_map: dict[str, Language] | None = None
) -> Language:
    """Detect language from file extension.

    Args:
        file_path: Path to the file
        extension_map: Optional override of EXTENSION_MAP

    Returns:
        Language identifier or "unknown"
    """
    path = Path(file_path)
    ext = path.suffix.lower()
    return (extension_map or EXTENSION_MAP).get(ext, "unknown")
