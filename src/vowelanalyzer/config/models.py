"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ExportSettings(BaseModel):
    """PDF report export settings."""

    output_path: Path = Field(
        default=Path("vowel-analysis.pdf"), description="Where the PDF report is written"
    )
    page_size: str = Field(default="letter", description="Page size (letter or A4)")
    font_size: int = Field(default=11, ge=6, le=24, description="Body text font size")

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: str) -> str:
        """Ensure the page size is one reportlab knows by name."""
        normalized = v.lower()
        if normalized == "letter":
            return "letter"
        if normalized == "a4":
            return "A4"
        raise ValueError(f"Invalid page size: {v}. Must be 'letter' or 'A4'")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=False, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class VowelAnalyzerConfig(BaseModel):
    """Main configuration for VowelAnalyzer."""

    export: ExportSettings = Field(
        default_factory=ExportSettings, description="PDF export settings"
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    class Config:
        """Pydantic config."""

        validate_assignment = True
        extra = "forbid"  # Raise error on unknown fields
