"""Tests for the shared knowledge registry."""
from knowledge_docgen.enums.models import EnumGroup, EnumMember
from knowledge_docgen.registry import KnowledgeRegistry
from knowledge_docgen.sql_schema.parser import ColumnDefinition, TableDefinition


def _table(name, *columns):
    return TableDefinition(name=name, columns=[ColumnDefinition(c, "int") for c in columns])


class TestEnumRegistry:
    """Test enum group accumulation."""

    def test_same_name_is_merged(self):
        registry = KnowledgeRegistry()
        first = EnumGroup("G desc", "desc", "p", "a.go", "const", [EnumMember("A")], ["a"])
        second = EnumGroup("G desc", "desc", "q", "b.go", "const", [EnumMember("A"), EnumMember("B")], ["b"])

        assert registry.add_enum_group(first) is first
        assert registry.add_enum_group(second) is first

        assert list(registry.enums) == ["G desc"]
        assert [m.name for m in first.members] == ["A", "B"]
        assert first.tags == ["a", "b"]

    def test_insertion_order_kept(self):
        registry = KnowledgeRegistry()
        for name in ("Zeta x", "Alpha y"):
            registry.add_enum_group(EnumGroup(name, "", "p", "f.go", "const", [EnumMember("A")]))
        assert list(registry.enums) == ["Zeta x", "Alpha y"]


class TestTableRegistry:
    """Test table definition and comment handling."""

    def test_comment_column_updates_only_target(self):
        registry = KnowledgeRegistry()
        registry.define_table(_table("t", "a", "c", "d"))

        assert registry.comment_column("t", "c", "see") is True

        assert [col.comment for col in registry.tables["t"].columns] == ["", "see", ""]

    def test_table_comment_creates_placeholder(self):
        registry = KnowledgeRegistry()
        table = registry.comment_table("t", "表")

        assert table.columns == []
        assert registry.tables["t"].comment == "表"

    def test_redefinition_keeps_comments(self):
        """A second CREATE TABLE keeps the table comment and matching column comments."""
        registry = KnowledgeRegistry()
        registry.define_table(_table("t", "a", "b"))
        registry.comment_table("t", "表")
        registry.comment_column("t", "a", "甲")

        registry.define_table(_table("t", "b", "a", "c"))

        table = registry.tables["t"]
        assert table.comment == "表"
        assert [(c.name, c.comment) for c in table.columns] == [("b", ""), ("a", "甲"), ("c", "")]

    def test_pending_comment_applied_on_define(self):
        registry = KnowledgeRegistry()

        assert registry.comment_column("t", "b", "later") is False
        assert "t" not in registry.tables

        registry.define_table(_table("t", "a", "b"))

        assert registry.tables["t"].get_column("b").comment == "later"
        assert registry.pending_column_comments == {}

    def test_pending_comment_for_missing_column_stays_orphan(self):
        registry = KnowledgeRegistry()
        registry.comment_column("t", "gone", "x")
        registry.define_table(_table("t", "a"))

        assert registry.orphan_comment_count() == 1
        assert registry.tables["t"].get_column("a").comment == ""
