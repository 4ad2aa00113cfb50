"""Tests for Markdown knowledge document rendering."""
from knowledge_docgen.enums.models import EnumGroup, EnumMember, MemberValue, NO_VALUE
from knowledge_docgen.registry import KnowledgeRegistry
from knowledge_docgen.reports.generator import render_markdown
from knowledge_docgen.sql_schema.parser import ColumnDefinition, TableDefinition


def _registry():
    registry = KnowledgeRegistry()
    registry.add_enum_group(EnumGroup(
        name="MailStatus 邮件状态",
        description="邮件状态",
        package="mail",
        file="mail/status.go",
        decl_kind="const",
        members=[
            EnumMember("MailStatusPending", MemberValue("literal", "1"), "待发送"),
            EnumMember("MailStatusUnknown", NO_VALUE, "邮件状态"),
        ],
        tags=["mail", "status"],
        category="状态",
    ))
    registry.tables["users"] = TableDefinition(
        name="users",
        columns=[ColumnDefinition("id", "bigint", "主键"), ColumnDefinition("name", "text")],
    )
    registry.tables["accounts"] = TableDefinition(
        name="accounts",
        comment="账户表",
        columns=[ColumnDefinition("balance", "numeric(10,2)", "余额")],
    )
    return registry


class TestRenderMarkdown:
    """Test document layout."""

    def test_full_document(self):
        expected = (
            "# 枚举类型\n\n"
            "## MailStatus 邮件状态\n\n"
            "**标签：** `mail` · `status`\n\n"
            "| 变量 | 原值 | 描述 |\n|---|---|---|\n"
            "| MailStatusPending | 1 | 待发送 |\n"
            "| MailStatusUnknown |  | 邮件状态 |\n"
            "\n"
            "# 数据库表\n\n"
            "## accounts（账户表）\n\n"
            "| 字段 | 类型 | 描述 |\n|---|---|---|\n"
            "| balance | numeric(10,2) | 余额 |\n"
            "\n"
            "## users\n\n"
            "| 字段 | 类型 | 描述 |\n|---|---|---|\n"
            "| id | bigint | 主键 |\n"
            "| name | text | - |\n"
            "\n"
        )

        assert render_markdown(_registry()) == expected

    def test_empty_registry(self):
        assert render_markdown(KnowledgeRegistry()) == ""

    def test_sections_are_optional(self):
        registry = _registry()
        registry.enums.clear()

        document = render_markdown(registry)

        assert "# 枚举类型" not in document
        assert document.startswith("# 数据库表")

    def test_no_tag_line_without_tags(self):
        registry = KnowledgeRegistry()
        registry.add_enum_group(EnumGroup("X y", "y", "p", "f.go", "const", [EnumMember("X")]))

        assert "**标签：**" not in render_markdown(registry)

    def test_cells_escaped(self):
        registry = KnowledgeRegistry()
        registry.add_enum_group(EnumGroup(
            "X y", "y", "p", "f.go", "const",
            [EnumMember("X", MemberValue("literal", '"a|b"'), "line one\nline two")],
        ))

        assert '| X | "a\\|b" | line one<br>line two |' in render_markdown(registry)

    def test_tables_sorted_regardless_of_discovery(self):
        registry = KnowledgeRegistry()
        for name in ("zeta", "alpha", "mid"):
            registry.tables[name] = TableDefinition(name=name)

        document = render_markdown(registry)

        assert document.index("## alpha") < document.index("## mid") < document.index("## zeta")
