"""SQL statement interpreters.

Recovers table/column definitions from CREATE TABLE statements and comment
text from COMMENT ON statements. Statements are expected to come from
``split_sql_statements`` (single line, comment free). Parsing is regex and
paren-depth based; there is no SQL grammar behind it.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass
class ColumnDefinition:
    """Column recovered from CREATE TABLE."""
    name: str
    data_type: str
    comment: str = ""


@dataclass
class TableDefinition:
    """Table recovered from CREATE TABLE and/or COMMENT ON TABLE."""
    name: str
    comment: str = ""
    columns: list[ColumnDefinition] = field(default_factory=list)

    def get_column(self, name: str) -> ColumnDefinition | None:
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass
class ParsedComment:
    """Target and text of a COMMENT ON statement.

    ``column`` is None for table comments. ``text`` is still raw; it is
    decoded by the caller.
    """
    table: str
    column: str | None
    text: str


_TABLE_NAME_RE = re.compile(
    r'CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?(?:"?[^"\s(.]+"?\.)?"?([^"\s(.]+)"?',
    re.IGNORECASE
)

_FIELDS_RE = re.compile(r'\((.*)\)')

_COMMENT_RES = (
    (re.compile(
        r"COMMENT\s+ON\s+(?:(TABLE|COLUMN)\s+)?(\S+)\s+IS\s+'((?:[^']|'')*)'",
        re.IGNORECASE
    ), "''", "'"),
    (re.compile(
        r'COMMENT\s+ON\s+(?:(TABLE|COLUMN)\s+)?(\S+)\s+IS\s+"((?:[^"]|"")*)"',
        re.IGNORECASE
    ), '""', '"'),
)

# SQL type names spelled with more than one word
MULTIWORD_TYPES: tuple[tuple[str, ...], ...] = (
    ("character", "varying"),
    ("national", "character", "varying"),
    ("national", "character"),
    ("double", "precision"),
    ("bit", "varying"),
    ("timestamp", "with", "time", "zone"),
    ("timestamp", "without", "time", "zone"),
    ("time", "with", "time", "zone"),
    ("time", "without", "time", "zone"),
)

_SKIPPED_CLAUSES = ("PRIMARY KEY", "CONSTRAINT")


def parse_create_table(statement: str) -> TableDefinition:
    """Parse a CREATE TABLE statement.

    Args:
        statement: SQL CREATE TABLE statement

    Returns:
        TableDefinition with columns in declaration order and no comments

    Raises:
        ValueError: If the table name or the column list cannot be found
    """
    name_match = _TABLE_NAME_RE.search(statement)
    if not name_match:
        raise ValueError("cannot extract table name")

    table_name = normalize_identifier(name_match.group(1))

    fields_match = _FIELDS_RE.search(statement)
    if not fields_match:
        raise ValueError("cannot extract column definitions")

    columns = []
    for field_def in split_fields(fields_match.group(1)):
        field_def = field_def.strip()
        if not field_def or field_def.upper().startswith(_SKIPPED_CLAUSES):
            continue

        column = parse_field_def(field_def)
        if column:
            columns.append(column)

    return TableDefinition(name=table_name, columns=columns)


def parse_comment(statement: str) -> ParsedComment:
    """Parse a COMMENT ON statement.

    Supports ``COMMENT ON [TABLE|COLUMN] target IS '...'`` and the same form
    with a double quoted text. Schema segments of the target are dropped.

    Args:
        statement: SQL COMMENT ON statement

    Returns:
        ParsedComment

    Raises:
        ValueError: If no quote style matches or the target is malformed
    """
    for pattern, escaped, quote in _COMMENT_RES:
        match = pattern.search(statement)
        if match:
            break
    else:
        raise ValueError("cannot extract comment text")

    kind = (match.group(1) or "").upper()
    parts = [normalize_identifier(p) for p in match.group(2).split(".")]
    text = match.group(3).replace(escaped, quote)

    if any(not p for p in parts):
        raise ValueError(f"invalid comment target: {match.group(2)}")

    # A target without a dot names a table, whatever the keyword says
    if kind == "TABLE" or len(parts) == 1:
        return ParsedComment(table=parts[-1], column=None, text=text)

    return ParsedComment(table=parts[-2], column=parts[-1], text=text)


def normalize_identifier(name: str) -> str:
    """Strip quoting from an identifier."""
    return name.strip().strip('"')


def split_fields(fields: str) -> list[str]:
    """Split a column list on commas that are not inside parentheses."""
    parts = []
    current = []
    depth = 0

    for char in fields:
        if char == '(':
            depth += 1
            current.append(char)
        elif char == ')':
            depth -= 1
            current.append(char)
        elif char == ',' and depth == 0:
            parts.append(''.join(current))
            current = []
        else:
            current.append(char)

    if current:
        parts.append(''.join(current))

    return parts


def parse_field_def(field_def: str) -> ColumnDefinition | None:
    """Parse one column clause into name and type.

    Returns None for clauses with fewer than two tokens.
    """
    field_def = field_def.strip()
    parts = field_def.split()
    if len(parts) < 2:
        return None

    name = normalize_identifier(parts[0])
    rest = field_def[len(parts[0]):].lstrip()

    return ColumnDefinition(name=name, data_type=extract_type(rest))


def extract_type(definition: str) -> str:
    """Extract the data type at the start of a column definition.

    The type ends at the first space outside parentheses, so ``numeric(10,2)``
    stays whole. Multi-word type names such as ``character varying(50)`` are
    kept together.
    """
    tokens = _split_top_level_tokens(definition)
    if not tokens:
        return ""

    # "numeric (10,2)" -> "numeric(10,2)"
    if len(tokens) > 1 and tokens[1].startswith("("):
        tokens[0:2] = [tokens[0] + tokens[1]]

    bases = [t.split("(", 1)[0].lower() for t in tokens]
    for words in sorted(MULTIWORD_TYPES, key=len, reverse=True):
        if tuple(bases[:len(words)]) == words:
            return " ".join(tokens[:len(words)])

    return tokens[0]


def _split_top_level_tokens(text: str) -> list[str]:
    """Split on whitespace outside parentheses."""
    tokens = []
    current = []
    depth = 0

    for char in text:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1

        if char.isspace() and depth <= 0:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append(''.join(current))

    return tokens
