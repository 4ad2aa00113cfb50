"""Enumeration groups extracted from annotated Go declarations."""
from .models import (
    Category,
    DeclKind,
    EnumGroup,
    EnumMember,
    MemberValue,
    NO_VALUE,
    ValueKind,
)
from .metadata import (
    extract_keywords,
    generate_tags,
    infer_category,
    merge_enum_group,
    split_camel_case,
)

__all__ = [
    "Category",
    "DeclKind",
    "EnumGroup",
    "EnumMember",
    "MemberValue",
    "NO_VALUE",
    "ValueKind",
    "extract_keywords",
    "generate_tags",
    "infer_category",
    "merge_enum_group",
    "split_camel_case",
]
