from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from dotenv import load_dotenv

from knowledge_docgen.config import DocgenConfig, load_docgen_config
from knowledge_docgen.indexer.indexer import KnowledgeIndexer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knowledge-docgen",
        description="Generate a knowledge document from annotated Go enums and SQL schema comments"
    )
    parser.add_argument("--localpath", required=True, help="Local project path to scan")
    parser.add_argument("--output", default=None,
                        help="Output directory (default: from config, else 'docs')")
    parser.add_argument("--config", default=None,
                        help="Path to YAML config (default: $DOCGEN_CONFIG or config/docgen.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        config = load_docgen_config(args.config)
        configure_logging(config, verbose=args.verbose)

        output_file = generate(args.localpath, args.output or config.output.directory, config)
        print(f"Knowledge document written to {output_file}")
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def configure_logging(config: DocgenConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    logging.basicConfig(
        level=level,
        format=config.logging.format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def generate(project_path: str, output_dir: str | Path, config: DocgenConfig) -> Path:
    """Scan a project and write its knowledge document.

    Args:
        project_path: Project root to scan
        output_dir: Directory for the document, created if missing
        config: Loaded configuration

    Returns:
        Path of the written document
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(f"Failed to create output directory {output_dir}: {e}") from e

    indexer = KnowledgeIndexer(config.scan)

    try:
        indexer.parse_enums(project_path)
    except Exception as e:
        raise RuntimeError(f"Failed to parse enums: {e}") from e

    try:
        indexer.parse_db_comments(project_path)
    except Exception as e:
        raise RuntimeError(f"Failed to parse database comments: {e}") from e

    project_name = Path(project_path).resolve().name
    output_file = output_dir / config.output.filename_template.format(project=project_name)

    # surrogateescape writes undecodable comment bytes back unchanged
    output_file.write_text(indexer.render(), encoding="utf-8", errors="surrogateescape")
    logger.info(f"Wrote {output_file}")

    return output_file


if __name__ == "__main__":
    run()
