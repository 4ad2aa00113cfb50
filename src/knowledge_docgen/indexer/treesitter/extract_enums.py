"""Extract annotated enum groups from parsed Go trees.

A top-level ``const`` or ``var`` declaration opts in with a doc comment
carrying the marker::

    // @ai 邮件发送状态枚举
    const (
        MailStatusPending = 1 // 待发送
        MailStatusSending = 2 // 发送中
    )
"""
from __future__ import annotations

from typing import Iterator

from knowledge_docgen.enums.metadata import generate_tags, infer_category
from knowledge_docgen.enums.models import EnumGroup, EnumMember, MemberValue, NO_VALUE


DECLARATION_KINDS = {
    "const_declaration": "const",
    "var_declaration": "var",
}

SPEC_TYPES = ("const_spec", "var_spec")

LITERAL_TYPES = {
    "int_literal",
    "float_literal",
    "imaginary_literal",
    "rune_literal",
    "interpreted_string_literal",
    "raw_string_literal",
}

IDENTIFIER_TYPES = {"identifier", "iota", "true", "false", "nil"}

DEFAULT_MARKER = "@ai"


def extract_enum_groups(
    source: bytes,
    tree: any,
    file_path: str = "",
    marker: str = DEFAULT_MARKER
) -> list[EnumGroup]:
    """Extract all annotated enum groups from a parsed Go file.

    Args:
        source: Source code bytes
        tree: Tree-sitter parse tree
        file_path: File path recorded on each group
        marker: Tag that opts a declaration group in

    Returns:
        Groups in declaration order, with tags and category filled in
    """
    root = tree.root_node
    package = _package_name(source, root)

    groups = []
    for node in root.named_children:
        decl_kind = DECLARATION_KINDS.get(node.type)
        if not decl_kind:
            continue

        description = _marker_description(source, node, marker)
        if description is None:
            continue

        group = _extract_group(source, node, decl_kind, description, package, file_path)
        if group:
            groups.append(group)

    return groups


def _extract_group(
    source: bytes,
    node: any,
    decl_kind: str,
    description: str,
    package: str,
    file_path: str
) -> EnumGroup | None:
    """Build an EnumGroup from a declaration; None if it declares nothing."""
    specs = list(_iter_specs(node))
    members = [m for spec in specs for m in _extract_members(source, spec, description)]
    if not members:
        return None

    group = EnumGroup(
        name=f"{_group_base_name(source, specs)} {description}",
        description=description,
        package=package,
        file=file_path,
        decl_kind=decl_kind,
        members=members,
    )
    group.tags = generate_tags(group)
    group.category = infer_category(group)
    return group


def _iter_specs(node: any) -> Iterator[any]:
    """Yield const_spec/var_spec nodes, with or without parentheses."""
    for child in node.named_children:
        if child.type in SPEC_TYPES:
            yield child
        elif child.type == "var_spec_list":
            yield from (c for c in child.named_children if c.type in SPEC_TYPES)


def _extract_members(source: bytes, spec: any, group_comment: str) -> Iterator[EnumMember]:
    """Yield one member per declared name in a spec."""
    names = _spec_names(spec)

    values = []
    value_list = spec.child_by_field_name("value")
    if value_list:
        values = [v for v in value_list.named_children if v.type != "comment"]

    trailing = _trailing_comment(spec)
    if trailing:
        comment = _comment_text(_get_text(source, trailing))
    else:
        doc = _leading_comments(spec)
        if doc:
            comment = "\n".join(_comment_text(_get_text(source, c)) for c in doc).strip()
        else:
            comment = group_comment

    for i, name_node in enumerate(names):
        yield EnumMember(
            name=_get_text(source, name_node),
            value=_member_value(source, values[i]) if i < len(values) else NO_VALUE,
            comment=comment,
        )


def _spec_names(spec: any) -> list:
    """Declared name nodes of a spec, without the comma separators."""
    return [n for n in spec.children_by_field_name("name") if n.type == "identifier"]


def _member_value(source: bytes, node: any) -> MemberValue:
    """Classify an initializer expression."""
    if node.type in LITERAL_TYPES:
        return MemberValue("literal", _get_text(source, node))

    if node.type in IDENTIFIER_TYPES:
        return MemberValue("identifier", _get_text(source, node))

    if node.type == "selector_expression":
        operand = node.child_by_field_name("operand")
        field = node.child_by_field_name("field")
        if operand and field and operand.type == "identifier":
            return MemberValue(
                "qualified",
                f"{_get_text(source, operand)}.{_get_text(source, field)}"
            )

    return NO_VALUE


def _group_base_name(source: bytes, specs: list) -> str:
    """Derive the enum type name for a declaration group.

    A single spec with a plain named type uses that type. Otherwise the first
    declared name is cut before its last uppercase letter, so
    ``MailStatusPending`` gives ``MailStatus``.
    """
    if len(specs) == 1:
        type_node = specs[0].child_by_field_name("type")
        if type_node and type_node.type == "type_identifier":
            return _get_text(source, type_node)

    if specs:
        names = _spec_names(specs[0])
        if names:
            return common_prefix(_get_text(source, names[0]))

    return "Unknown"


def common_prefix(name: str) -> str:
    """Strip the trailing capitalized word from an identifier.

    Returns the full name when there is nothing before that word.
    """
    for i in range(len(name) - 1, 0, -1):
        if "A" <= name[i] <= "Z":
            return name[:i]
    return name


def _marker_description(source: bytes, node: any, marker: str) -> str | None:
    """Return the marker comment text of a declaration, or None."""
    for comment in _leading_comments(node):
        text = _comment_text(_get_text(source, comment))
        if marker in text:
            return text.replace(marker, "", 1).strip()
    return None


def _leading_comments(node: any) -> list:
    """Collect the comment block directly above a node.

    Comments must be on consecutive lines ending just above the node, and a
    comment that trails code on its own line does not count.
    """
    comments = []
    row = node.start_point[0]
    prev = node.prev_named_sibling

    while prev is not None and prev.type == "comment" and prev.end_point[0] == row - 1:
        before = _prev_token(prev)
        if before is not None and before.type != "comment" and before.end_point[0] == prev.start_point[0]:
            break
        comments.append(prev)
        row = prev.start_point[0]
        prev = prev.prev_named_sibling

    comments.reverse()
    return comments


def _trailing_comment(node: any) -> any:
    """Return the comment on the same line right after a node, if any."""
    current = node
    sibling = current.next_named_sibling

    # A lone spec ends its declaration, the comment may sit one level up
    while sibling is None and current.parent is not None and current.parent.type in DECLARATION_KINDS:
        current = current.parent
        sibling = current.next_named_sibling

    if sibling is not None and sibling.type == "comment" and sibling.start_point[0] == node.end_point[0]:
        return sibling
    return None


def _prev_token(node: any) -> any:
    """Previous sibling, skipping newline terminators."""
    prev = node.prev_sibling
    while prev is not None and prev.type == "\n":
        prev = prev.prev_sibling
    return prev


def _comment_text(raw: str) -> str:
    """Strip ``//`` or ``/* */`` delimiters from a comment."""
    if raw.startswith("//"):
        return raw[2:].strip()

    if raw.startswith("/*"):
        body = raw[2:-2] if raw.endswith("*/") else raw[2:]
        lines = [line.strip().lstrip("*").strip() for line in body.splitlines()]
        return "\n".join(line for line in lines if line)

    return raw.strip()


def _package_name(source: bytes, root: any) -> str:
    for node in root.named_children:
        if node.type == "package_clause":
            for child in node.named_children:
                if child.type == "package_identifier":
                    return _get_text(source, child)
    return ""


def _get_text(source: bytes, node: any) -> str:
    """Get text content of a node."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
