"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from vowelanalyzer.config import ConfigManager, ExportSettings, LoggingSettings, VowelAnalyzerConfig


class TestModels:
    """Tests for the configuration models."""

    def test_defaults(self):
        """Test default values."""
        config = VowelAnalyzerConfig()
        assert config.export.output_path == Path("vowel-analysis.pdf")
        assert config.export.page_size == "letter"
        assert config.logging.level == "INFO"
        assert not config.logging.console_enabled
        assert not config.logging.file_enabled

    def test_page_size_normalized(self):
        """Test that page sizes are case-insensitive."""
        assert ExportSettings(page_size="a4").page_size == "A4"
        assert ExportSettings(page_size="LETTER").page_size == "letter"

    def test_invalid_page_size(self):
        """Test that unknown page sizes are rejected."""
        with pytest.raises(ValidationError):
            ExportSettings(page_size="tabloid")

    def test_log_level_uppercased(self):
        """Test that log levels are normalized."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_unknown_fields_rejected(self):
        """Test that unknown top-level keys are rejected."""
        with pytest.raises(ValidationError):
            VowelAnalyzerConfig(colors=True)


class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture(autouse=True)
    def no_default_locations(self, monkeypatch, tmp_path):
        """Point the default search locations into tmp_path."""
        monkeypatch.setattr(
            ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [tmp_path / "vowel-analyzer.yaml"]
        )

    def test_load_missing_raises(self):
        """Test that a missing config raises without create_if_missing."""
        with pytest.raises(FileNotFoundError):
            ConfigManager().load()

    def test_load_missing_uses_defaults(self):
        """Test that defaults are used when allowed."""
        manager = ConfigManager()
        config = manager.load(create_if_missing=True)

        assert config == VowelAnalyzerConfig()
        assert manager.config_path is None

    def test_load_explicit_file(self, tmp_path):
        """Test loading values from a YAML file."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("export:\n  output_path: reports/out.pdf\n  font_size: 14\n")

        manager = ConfigManager(config_file)
        config = manager.load()

        assert config.export.output_path == Path("reports/out.pdf")
        assert config.export.font_size == 14
        assert manager.config_path == config_file

    def test_load_default_location(self, tmp_path):
        """Test that the default location is searched."""
        (tmp_path / "vowel-analyzer.yaml").write_text("logging:\n  level: warning\n")

        assert ConfigManager().load().logging.level == "WARNING"

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty YAML file yields the default config."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert ConfigManager(config_file).load() == VowelAnalyzerConfig()

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises ValueError."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("export: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(config_file).load()

    def test_invalid_values(self, tmp_path):
        """Test that invalid values raise ValueError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("export:\n  font_size: 100\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_file).load()

    def test_non_mapping_yaml(self, tmp_path):
        """Test that a YAML list at the top level raises ValueError."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_file).load()

    def test_save_and_reload(self, tmp_path):
        """Test that a saved config loads back equal."""
        config = VowelAnalyzerConfig()
        config.export.page_size = "A4"
        config_file = tmp_path / "nested" / "config.yaml"

        manager = ConfigManager()
        manager.save(config, config_file)

        assert manager.config_path == config_file
        assert ConfigManager(config_file).load() == config

    def test_save_requires_config_and_path(self, tmp_path):
        """Test that save has no implicit config or destination."""
        manager = ConfigManager()

        with pytest.raises(TypeError):
            manager.save()
        with pytest.raises(TypeError):
            manager.save(VowelAnalyzerConfig())

        assert manager.config_path is None
        assert not (tmp_path / "vowel-analyzer.yaml").exists()
