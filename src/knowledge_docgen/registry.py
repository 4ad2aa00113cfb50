"""Shared extraction state for one scan run.

Both the enum scanner and the SQL extractor write into a KnowledgeRegistry;
the report generator reads it once both scans are done.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .enums.metadata import merge_enum_group
from .enums.models import EnumGroup
from .sql_schema.parser import TableDefinition

logger = logging.getLogger(__name__)


@dataclass
class KnowledgeRegistry:
    """Enum groups keyed by group name and tables keyed by bare table name.

    Both maps keep first-discovery order. Column comments whose column is not
    known yet wait in ``pending_column_comments`` until a CREATE TABLE
    declares it; they are never rendered on their own.
    """
    enums: dict[str, EnumGroup] = field(default_factory=dict)
    tables: dict[str, TableDefinition] = field(default_factory=dict)
    pending_column_comments: dict[str, dict[str, str]] = field(default_factory=dict)

    def add_enum_group(self, group: EnumGroup) -> EnumGroup:
        """Add a group, merging into an existing group with the same name."""
        existing = self.enums.get(group.name)
        if existing is None:
            self.enums[group.name] = group
            return group

        logger.debug(f"Merging enum group {group.name!r} from {group.file}")
        merge_enum_group(existing, group)
        return existing

    def define_table(self, table: TableDefinition) -> TableDefinition:
        """Store columns from a CREATE TABLE.

        A table already known (placeholder from COMMENT ON TABLE, or an
        earlier CREATE TABLE) keeps its comment and gets the new columns.
        Column comments are carried over by column name.
        """
        existing = self.tables.get(table.name)
        if existing is None:
            self.tables[table.name] = table
            existing = table
        else:
            for column in table.columns:
                previous = existing.get_column(column.name)
                if previous and previous.comment and not column.comment:
                    column.comment = previous.comment
            existing.columns = table.columns

        pending = self.pending_column_comments.get(existing.name, {})
        for column in existing.columns:
            if column.name in pending:
                column.comment = pending.pop(column.name)
        if not pending:
            self.pending_column_comments.pop(existing.name, None)

        return existing

    def comment_table(self, table_name: str, comment: str) -> TableDefinition:
        """Set a table comment, creating an empty placeholder if needed."""
        table = self.tables.get(table_name)
        if table is None:
            table = TableDefinition(name=table_name)
            self.tables[table_name] = table

        table.comment = comment
        return table

    def comment_column(self, table_name: str, column_name: str, comment: str) -> bool:
        """Set a column comment.

        Returns:
            True if the column was updated, False if the comment was parked
            until the column is declared.
        """
        table = self.tables.get(table_name)
        column = table.get_column(column_name) if table else None

        if column is None:
            logger.debug(f"No column {table_name}.{column_name} yet, keeping comment pending")
            self.pending_column_comments.setdefault(table_name, {})[column_name] = comment
            return False

        column.comment = comment
        return True

    def orphan_comment_count(self) -> int:
        """Number of column comments that never found their column."""
        return sum(len(c) for c in self.pending_column_comments.values())
