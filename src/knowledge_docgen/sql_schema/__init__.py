"""SQL schema knowledge extraction.

Recovers table and column semantics from SQL schema files:
- Split files into CREATE TABLE / COMMENT ON / ALTER TABLE statements
- Parse column names and types from CREATE TABLE
- Attach COMMENT ON TABLE / COLUMN text, decoding legacy Chinese encodings
"""
from __future__ import annotations

from .encoding import decode_comment, FALLBACK_ENCODINGS

from .splitter import split_sql_statements, is_relevant_statement

from .parser import (
    ColumnDefinition,
    TableDefinition,
    ParsedComment,
    parse_create_table,
    parse_comment,
    split_fields,
    parse_field_def,
    extract_type,
)

from .extractor import extract_sql_file, extract_sql_content

__all__ = [
    # Encoding
    "decode_comment",
    "FALLBACK_ENCODINGS",
    # Splitter
    "split_sql_statements",
    "is_relevant_statement",
    # Parser types
    "ColumnDefinition",
    "TableDefinition",
    "ParsedComment",
    # Parser functions
    "parse_create_table",
    "parse_comment",
    "split_fields",
    "parse_field_def",
    "extract_type",
    # Extractor functions
    "extract_sql_file",
    "extract_sql_content",
]
