"""Enumeration data model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


ValueKind = Literal["literal", "identifier", "qualified", "none"]
DeclKind = Literal["const", "var"]
Category = Literal["状态", "类型", "标志", "模式", "级别", "其他"]


@dataclass(frozen=True)
class MemberValue:
    """Initializer of an enum member.

    kind is one of:
    - literal: number, string or rune literal, kept as written
    - identifier: bare name (including iota, true, false, nil)
    - qualified: ``pkg.Name`` selector
    - none: no initializer, or an expression we do not render
    """
    kind: ValueKind
    text: str = ""

    def render(self) -> str:
        if self.kind == "none":
            return ""
        return self.text


NO_VALUE = MemberValue("none")


@dataclass(frozen=True)
class EnumMember:
    """One declared name inside an enum group."""
    name: str
    value: MemberValue = NO_VALUE
    comment: str = ""


@dataclass
class EnumGroup:
    """An annotated const/var declaration group."""
    name: str
    description: str
    package: str
    file: str
    decl_kind: DeclKind
    members: list[EnumMember] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    category: Category = "其他"

    def member_names(self) -> set[str]:
        return {m.name for m in self.members}
