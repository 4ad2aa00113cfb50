"""Knowledge document generation.

Renders a KnowledgeRegistry as Markdown:
- Enum groups, in discovery order, with search tags and a member table
- Database tables, sorted by name, with column types and comments
"""
from __future__ import annotations

from knowledge_docgen.enums.models import EnumGroup
from knowledge_docgen.registry import KnowledgeRegistry
from knowledge_docgen.sql_schema.parser import TableDefinition


ENUM_SECTION_TITLE = "枚举类型"
TABLE_SECTION_TITLE = "数据库表"
TAG_LABEL = "**标签：** "
TAG_SEPARATOR = " · "
ENUM_TABLE_HEADER = "| 变量 | 原值 | 描述 |\n|---|---|---|\n"
COLUMN_TABLE_HEADER = "| 字段 | 类型 | 描述 |\n|---|---|---|\n"
EMPTY_COMMENT = "-"


def render_markdown(registry: KnowledgeRegistry) -> str:
    """Render the whole registry as one Markdown document."""
    parts = []

    if registry.enums:
        parts.append(f"# {ENUM_SECTION_TITLE}\n\n")
        for group in registry.enums.values():
            parts.append(render_enum_group(group))

    if registry.tables:
        parts.append(f"# {TABLE_SECTION_TITLE}\n\n")
        for name in sorted(registry.tables):
            parts.append(render_table(registry.tables[name]))

    return "".join(parts)


def render_enum_group(group: EnumGroup) -> str:
    lines = [f"## {group.name}\n\n"]

    if group.tags:
        tags = TAG_SEPARATOR.join(f"`{tag}`" for tag in group.tags)
        lines.append(f"{TAG_LABEL}{tags}\n\n")

    lines.append(ENUM_TABLE_HEADER)
    for member in group.members:
        lines.append(
            f"| {_cell(member.name)} | {_cell(member.value.render())} | {_cell(member.comment)} |\n"
        )
    lines.append("\n")

    return "".join(lines)


def render_table(table: TableDefinition) -> str:
    if table.comment:
        lines = [f"## {table.name}（{table.comment}）\n\n"]
    else:
        lines = [f"## {table.name}\n\n"]

    lines.append(COLUMN_TABLE_HEADER)
    for column in table.columns:
        comment = column.comment or EMPTY_COMMENT
        lines.append(f"| {_cell(column.name)} | {_cell(column.data_type)} | {_cell(comment)} |\n")
    lines.append("\n")

    return "".join(lines)


def _cell(text: str) -> str:
    """Keep a value inside its Markdown table cell."""
    return text.replace("|", "\\|").replace("\n", "<br>")
