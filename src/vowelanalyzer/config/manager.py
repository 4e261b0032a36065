"""Configuration management - loading, validation, and persistence."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import VowelAnalyzerConfig


class ConfigManager:
    """Manages loading and saving configuration."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path("vowel-analyzer.yaml"),
        Path.home() / ".config" / "vowelanalyzer" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path

    def load(self, create_if_missing: bool = False) -> VowelAnalyzerConfig:
        """
        Load configuration from file.

        Args:
            create_if_missing: Fall back to the default config if no config file is found.

        Returns:
            Loaded and validated configuration.

        Raises:
            FileNotFoundError: If no config found and create_if_missing is False.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()

        if config_file is None:
            if create_if_missing:
                return self._create_default_config()
            raise FileNotFoundError(
                f"No configuration file found. Searched: {self.DEFAULT_CONFIG_LOCATIONS}"
            )

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            config = VowelAnalyzerConfig(**config_dict)
            self.config_path = config_file
            return config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e
        except TypeError as e:
            # Top-level YAML that is not a mapping
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

    def save(self, config: VowelAnalyzerConfig, path: Path):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
            path: Path to save to; parent directories are created
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = config.model_dump(mode="python")

        # Convert Path objects to strings for YAML serialization
        config_dict = self._paths_to_strings(config_dict)

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config_dict,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        self.config_path = path

    def _find_config_file(self) -> Path | None:
        """Find the explicit config file, or the first existing default location."""
        if self.config_path and self.config_path.exists():
            return self.config_path

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None

    def _create_default_config(self) -> VowelAnalyzerConfig:
        """Create and return default configuration."""
        return VowelAnalyzerConfig()

    @staticmethod
    def _paths_to_strings(obj):
        """Recursively convert Path objects to strings in a nested dict/list structure."""
        if isinstance(obj, Path):
            return str(obj)
        elif isinstance(obj, dict):
            return {key: ConfigManager._paths_to_strings(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [ConfigManager._paths_to_strings(item) for item in obj]
        else:
            return obj
