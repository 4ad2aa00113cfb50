"""Shared pytest fixtures for all tests."""
import pytest
from pathlib import Path

from knowledge_docgen.indexer.treesitter.parsers import parse_source


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_project():
    """Path to the sample Go + SQL project."""
    return FIXTURES_DIR / "sample_project"


@pytest.fixture
def parse_go():
    """Parse Go source text, returning (source_bytes, tree)."""
    def _parse(code: str):
        source = code.encode("utf-8")
        return source, parse_source(source, "go")
    return _parse
