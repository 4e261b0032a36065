"""Configuration module for VowelAnalyzer."""

from .manager import ConfigManager
from .models import ExportSettings, LoggingSettings, VowelAnalyzerConfig

__all__ = [
    "VowelAnalyzerConfig",
    "ExportSettings",
    "LoggingSettings",
    "ConfigManager",
]
