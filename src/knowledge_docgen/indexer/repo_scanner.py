"""Repository scanner with optional .gitignore support.

Walks a directory tree in sorted order and yields Go and SQL files.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterator
import pathspec

from .language_detect import Language, detect_language


def scan_repo(
    repo_root: Path | str,
    extension_map: dict[str, Language] | None = None,
    ignore_file: str = ".gitignore",
    respect_ignore_file: bool = False,
    skip_hidden: bool = False
) -> Iterator[tuple[Path, Language]]:
    """Scan a project for Go and SQL files.

    Args:
        repo_root: Root directory of the project
        extension_map: Extension to language mapping (default: EXTENSION_MAP)
        ignore_file: Name of ignore file (default: .gitignore)
        respect_ignore_file: Skip paths matched by the ignore file
        skip_hidden: Skip dot-files and dot-directories

    Yields:
        Tuples of (file_path, language), sorted by path within each directory

    Raises:
        FileNotFoundError: If repo_root does not exist
        NotADirectoryError: If repo_root is not a directory
    """
    repo_root = Path(repo_root).resolve()

    if not repo_root.exists():
        raise FileNotFoundError(f"Repository path not found: {repo_root}")

    if not repo_root.is_dir():
        raise NotADirectoryError(f"Repository path is not a directory: {repo_root}")

    spec = None
    gitignore_path = repo_root / ignore_file

    if respect_ignore_file and gitignore_path.exists():
        with open(gitignore_path, "r", encoding="utf-8") as f:
            spec = pathspec.PathSpec.from_lines("gitwildmatch", f.read().splitlines())

    for file_path in _walk_directory(repo_root, spec, repo_root, skip_hidden):
        language = detect_language(file_path, extension_map)

        # Only yield files we know how to read
        if language != "unknown":
            yield (file_path, language)


def _walk_directory(
    directory: Path,
    spec: pathspec.PathSpec | None,
    repo_root: Path,
    skip_hidden: bool
) -> Iterator[Path]:
    """Recursively walk directory, applying ignore filters."""
    for entry in sorted(directory.iterdir()):
        if skip_hidden and entry.name.startswith("."):
            continue

        rel_path = entry.relative_to(repo_root)

        if spec:
            match_path = f"{rel_path}/" if entry.is_dir() else str(rel_path)
            if spec.match_file(match_path):
                continue

        if entry.is_file():
            yield entry
        elif entry.is_dir():
            yield from _walk_directory(entry, spec, repo_root, skip_hidden)
