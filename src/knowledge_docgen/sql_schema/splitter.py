"""Line-oriented SQL statement splitter.

Turns a whole SQL file into single-line statements that the interpreters in
``parser.py`` can match with regular expressions. Only the statement kinds we
understand are kept.
"""
from __future__ import annotations

import re


RELEVANT_PREFIXES = ("CREATE TABLE", "COMMENT ON", "ALTER TABLE")

_INLINE_BLOCK_COMMENT = re.compile(r"/\*.*?\*/")


def split_sql_statements(sql: str) -> list[str]:
    """Split SQL content into complete, comment-free statements.

    Handles:
    - CRLF line endings and a leading BOM
    - ``--`` comments, whole-line and trailing
    - ``/* ... */`` comments closed on the same line

    A line that opens a block comment without closing it is dropped on its
    own; the lines that follow are not tracked as part of the comment.

    Args:
        sql: SQL file content

    Returns:
        Statements joined onto one line, each ending in ``;``
    """
    sql = sql.replace("\r\n", "\n").removeprefix("\ufeff")

    statements = []
    current: list[str] = []

    for line in sql.split("\n"):
        line = line.strip()

        if not line or line.startswith("--"):
            continue

        if "/*" in line and "*/" not in line:
            continue

        line = _INLINE_BLOCK_COMMENT.sub("", line)
        line = _strip_line_comment(line).strip()
        if not line:
            continue

        current.append(line)

        if line.endswith(";"):
            stmt = " ".join(current)
            if is_relevant_statement(stmt):
                statements.append(stmt)
            current = []

    # Trailing statement without a semicolon
    last = " ".join(current).strip()
    if last:
        if not last.endswith(";"):
            last += ";"
        if is_relevant_statement(last):
            statements.append(last)

    return statements


def is_relevant_statement(stmt: str) -> bool:
    """Check whether a statement is one of CREATE TABLE, COMMENT ON, ALTER TABLE."""
    return stmt.strip().upper().startswith(RELEVANT_PREFIXES)


def _strip_line_comment(line: str) -> str:
    """Remove a trailing ``--`` comment that is not inside a string literal."""
    quote = None

    for i, char in enumerate(line):
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == "-" and line.startswith("--", i):
            return line[:i]

    return line
