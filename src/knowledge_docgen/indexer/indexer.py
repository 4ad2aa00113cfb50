"""Knowledge extraction pipeline.

Coordinates the directory walk, Go enum scanning, SQL schema extraction and
document rendering over one shared registry.
"""
from __future__ import annotations

import logging
from pathlib import Path

from knowledge_docgen.config import ScanConfig
from knowledge_docgen.registry import KnowledgeRegistry
from knowledge_docgen.reports.generator import render_markdown
from knowledge_docgen.sql_schema.extractor import extract_sql_file
from .language_detect import build_extension_map
from .repo_scanner import scan_repo
from .treesitter.extract_enums import extract_enum_groups
from .treesitter.parsers import parse_file

logger = logging.getLogger(__name__)


class KnowledgeIndexer:
    """Owns one registry and fills it from a project tree.

    Usage:
        indexer = KnowledgeIndexer()
        indexer.parse_enums("path/to/project")
        indexer.parse_db_comments("path/to/project")
        markdown = indexer.render()
    """

    def __init__(
        self,
        config: ScanConfig | None = None,
        registry: KnowledgeRegistry | None = None
    ) -> None:
        self.config = config or ScanConfig()
        self.registry = registry or KnowledgeRegistry()
        self._extension_map = build_extension_map(
            self.config.source_extensions,
            self.config.sql_extensions
        )

    def parse_enums(self, root_path: Path | str) -> dict[str, int]:
        """Scan Go files under root_path for annotated enum groups.

        Returns:
            Dict with counts: {"files": N, "groups": M, "skipped_files": K}

        Raises:
            FileNotFoundError, NotADirectoryError: If root_path cannot be walked
            ValueError: On a Go syntax error, unless skip_unparsable_sources
        """
        root = Path(root_path).resolve()
        stats = {"files": 0, "groups": 0, "skipped_files": 0}

        for file_path, language in self._scan(root):
            if language != "go":
                continue

            try:
                stats["groups"] += self.parse_go_file(file_path, _relative(file_path, root))
            except ValueError as e:
                if not self.config.skip_unparsable_sources:
                    raise
                stats["skipped_files"] += 1
                logger.warning(f"Skipping unparsable source: {e}")
                continue

            stats["files"] += 1

        logger.info(f"Enum scan complete for {root}: {stats}")
        return stats

    def parse_db_comments(self, root_path: Path | str) -> dict[str, int]:
        """Scan SQL files under root_path for tables and comments.

        Returns:
            Dict with counts: {"files": N, "tables": M, "comments": C, "skipped": K}
        """
        root = Path(root_path).resolve()
        stats = {"files": 0, "tables": 0, "comments": 0, "skipped": 0}

        for file_path, language in self._scan(root):
            if language != "sql":
                continue

            file_stats = extract_sql_file(self.registry, file_path, _relative(file_path, root))
            stats["files"] += 1
            for key, count in file_stats.items():
                stats[key] += count

        orphans = self.registry.orphan_comment_count()
        if orphans:
            logger.debug(f"{orphans} column comments never matched a column")

        logger.info(f"SQL scan complete for {root}: {stats}")
        return stats

    def parse_go_file(self, file_path: Path | str, rel_path: str | None = None) -> int:
        """Parse one Go file and merge its groups into the registry.

        Returns:
            Number of annotated groups found in the file
        """
        source, tree = parse_file(file_path, "go")
        groups = extract_enum_groups(
            source,
            tree,
            file_path=rel_path or str(file_path),
            marker=self.config.marker
        )

        for group in groups:
            self.registry.add_enum_group(group)

        return len(groups)

    def render(self) -> str:
        """Render the current registry as Markdown."""
        return render_markdown(self.registry)

    def _scan(self, root: Path):
        return scan_repo(
            root,
            extension_map=self._extension_map,
            ignore_file=self.config.ignore_file,
            respect_ignore_file=self.config.respect_ignore_file,
            skip_hidden=self.config.skip_hidden
        )


def generate_knowledge(root_path: Path | str, config: ScanConfig | None = None) -> str:
    """Run both scans over a project and return the rendered document."""
    indexer = KnowledgeIndexer(config)
    indexer.parse_enums(root_path)
    indexer.parse_db_comments(root_path)
    return indexer.render()


def _relative(file_path: Path, root: Path) -> str:
    return file_path.relative_to(root).as_posix()
