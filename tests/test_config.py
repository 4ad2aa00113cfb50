"""Tests for docgen configuration loading."""
import pytest

from knowledge_docgen.config import DocgenConfig, ScanConfig, load_docgen_config


class TestDocgenConfig:
    """Test configuration defaults, validation and loading."""

    def test_defaults(self):
        config = DocgenConfig()

        assert config.scan.source_extensions == [".go"]
        assert config.scan.sql_extensions == [".sql"]
        assert config.scan.marker == "@ai"
        assert config.scan.respect_ignore_file is False
        assert config.output.directory == "docs"
        assert config.logging.level == "INFO"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "docgen.yaml"
        path.write_text(
            "scan:\n"
            "  marker: '@doc'\n"
            "  sql_extensions: ['.SQL', '.ddl']\n"
            "output:\n"
            "  directory: out\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_docgen_config(path)

        assert config.scan.marker == "@doc"
        assert config.scan.sql_extensions == [".sql", ".ddl"]
        assert config.output.directory == "out"
        assert config.logging.level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DocgenConfig.from_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="Empty configuration"):
            DocgenConfig.from_yaml(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scan:\n  source_extensions: ['go']\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            DocgenConfig.from_yaml(path)

    def test_blank_marker_rejected(self):
        with pytest.raises(ValueError):
            ScanConfig(marker="  ")

    def test_filename_template_needs_project(self):
        with pytest.raises(ValueError):
            DocgenConfig.model_validate({"output": {"filename_template": "out.md"}})

    def test_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("scan:\n  skip_hidden: true\n")
        monkeypatch.setenv("DOCGEN_CONFIG", str(path))

        assert load_docgen_config().scan.skip_hidden is True

    def test_defaults_without_any_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DOCGEN_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)

        assert load_docgen_config() == DocgenConfig()
