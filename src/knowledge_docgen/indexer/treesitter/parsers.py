"""Tree-sitter parser setup.

Uses the tree-sitter-go grammar package.
"""
from __future__ import annotations

from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Parser, Tree


# Grammar modules for each language we scan
_GRAMMARS = {
    "go": tree_sitter_go,
}

# Cached parsers for each language
_PARSERS: dict[str, Parser] = {}


def get_parser(language: str) -> Parser:
    """Get or create a tree-sitter parser for the given language.

    Args:
        language: Language identifier (go)

    Returns:
        Parser instance

    Raises:
        ValueError: If the language is not supported
    """
    if language in _PARSERS:
        return _PARSERS[language]

    grammar = _GRAMMARS.get(language)
    if grammar is None:
        raise ValueError(f"Language not available: {language}")

    parser = Parser(Language(grammar.language()))
    _PARSERS[language] = parser
    return parser


def parse_source(source: bytes, language: str = "go", file_path: str = "<string>") -> Tree:
    """Parse source bytes into a syntax tree.

    Args:
        source: Source code bytes
        language: Language identifier
        file_path: Path used in error messages

    Returns:
        Tree-sitter parse tree

    Raises:
        ValueError: If the source contains syntax errors
    """
    tree = get_parser(language).parse(source)

    if tree.root_node.has_error:
        error = _first_error(tree.root_node)
        line = error.start_point[0] + 1 if error else 0
        raise ValueError(f"Syntax error in {file_path} at line {line}")

    return tree


def parse_file(file_path: Path | str, language: str = "go") -> tuple[bytes, Tree]:
    """Read and parse a file.

    Returns:
        Tuple of (source_bytes, tree)

    Raises:
        OSError: If the file cannot be read
        ValueError: If the source contains syntax errors
    """
    source = Path(file_path).read_bytes()
    return source, parse_source(source, language, str(file_path))


def _first_error(node):
    """Find the first ERROR or MISSING node, depth first."""
    if node.type == "ERROR" or node.is_missing:
        return node

    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found:
                return found

    return None
