"""SQL schema extraction into the knowledge registry.

Reads SQL files, splits them into statements and applies CREATE TABLE and
COMMENT ON statements to a KnowledgeRegistry.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .encoding import decode_comment
from .parser import parse_comment, parse_create_table
from .splitter import split_sql_statements

if TYPE_CHECKING:
    from knowledge_docgen.registry import KnowledgeRegistry

logger = logging.getLogger(__name__)


def extract_sql_file(
    registry: KnowledgeRegistry,
    file_path: Path | str,
    source_file_path: str | None = None
) -> dict[str, int]:
    """Extract table metadata from a SQL file into the registry.

    Args:
        registry: Registry to update
        file_path: Path to the SQL file
        source_file_path: Path used in warnings (defaults to file_path)

    Returns:
        Dict with counts, see extract_sql_content

    Raises:
        OSError: If the file cannot be read
    """
    content = Path(file_path).read_bytes()
    return extract_sql_content(registry, content, source_file_path or str(file_path))


def extract_sql_content(
    registry: KnowledgeRegistry,
    content: bytes | str,
    source_file_path: str = "<string>"
) -> dict[str, int]:
    """Extract table metadata from SQL content into the registry.

    Bytes are decoded with ``surrogateescape`` so that comment payloads in a
    legacy encoding reach ``decode_comment`` unchanged.

    Returns:
        Dict with counts: {"tables": N, "comments": M, "skipped": K}
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="surrogateescape")

    stats = {"tables": 0, "comments": 0, "skipped": 0}

    for stmt in split_sql_statements(content):
        stmt_upper = stmt.upper()

        try:
            if stmt_upper.startswith("CREATE TABLE"):
                table = parse_create_table(stmt)
                registry.define_table(table)
                stats["tables"] += 1
                logger.debug(f"Stored table: {table.name} ({len(table.columns)} columns)")

            elif stmt_upper.startswith("COMMENT ON"):
                parsed = parse_comment(stmt)
                comment = decode_comment(parsed.text)
                if parsed.column is None:
                    registry.comment_table(parsed.table, comment)
                else:
                    registry.comment_column(parsed.table, parsed.column, comment)
                stats["comments"] += 1

        except ValueError as e:
            stats["skipped"] += 1
            logger.warning(
                f"Failed to parse statement in {source_file_path}: {e}\n"
                f"Statement: {stmt}"
            )

    return stats
