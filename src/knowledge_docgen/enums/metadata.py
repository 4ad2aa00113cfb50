"""Enum group metadata: search tags, category inference and merging."""
from __future__ import annotations

from .models import Category, EnumGroup


STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or",
    "in", "on", "at", "to", "for",
})

_TRIM_CHARS = ",.()[]{}\"'"

# First match wins, so "StatusType" is a status
CATEGORY_RULES: list[tuple[tuple[str, ...], Category]] = [
    (("status", "state"), "状态"),
    (("type",), "类型"),
    (("flag",), "标志"),
    (("mode",), "模式"),
    (("level",), "级别"),
]

DEFAULT_CATEGORY: Category = "其他"


def split_camel_case(text: str) -> list[str]:
    """Split text into words, starting a new word at every uppercase letter.

    >>> split_camel_case("MailStatusPending")
    ['Mail', 'Status', 'Pending']
    """
    words = []
    current = ""

    for char in text:
        if char.isupper():
            if current:
                words.append(current)
            current = char
        else:
            current += char

    if current:
        words.append(current)

    return words


def extract_keywords(text: str) -> list[str]:
    """Extract lower-cased keywords from free text.

    Drops stop words and anything of two bytes or fewer (UTF-8), so short
    English noise goes but two-character CJK words stay.
    """
    keywords = []

    for word in text.split():
        word = word.strip(_TRIM_CHARS).lower()
        if word in STOP_WORDS or len(word.encode("utf-8")) <= 2:
            continue
        keywords.append(word)

    return keywords


def generate_tags(group: EnumGroup) -> list[str]:
    """Build the sorted, deduplicated search tags for a group."""
    tags = set()

    for token in group.name.split():
        tags.update(w.lower() for w in split_camel_case(token))

    tags.update(extract_keywords(group.description))

    for member in group.members:
        tags.update(w.lower() for w in split_camel_case(member.name))
        tags.update(extract_keywords(member.comment))

    return sorted(tags)


def infer_category(group: EnumGroup) -> Category:
    """Classify a group by substrings of its name."""
    name = group.name.lower()

    for needles, category in CATEGORY_RULES:
        if any(needle in name for needle in needles):
            return category

    return DEFAULT_CATEGORY


def merge_enum_group(existing: EnumGroup, new: EnumGroup) -> None:
    """Merge ``new`` into ``existing`` in place.

    Descriptions are appended when they differ, members are unioned by name
    (existing wins) and tags are unioned.
    """
    if new.description and new.description != existing.description:
        existing.description += "\n" + new.description

    seen = existing.member_names()
    for member in new.members:
        if member.name not in seen:
            existing.members.append(member)
            seen.add(member.name)

    existing.tags = sorted(set(existing.tags) | set(new.tags))
