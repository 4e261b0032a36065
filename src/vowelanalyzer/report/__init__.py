"""Report module for console and PDF rendering of analysis results."""

from .exporter import ExportError, ReportExporter
from .presenter import ReportPresenter, ReportSection, build_sections

__all__ = [
    "ReportPresenter",
    "ReportSection",
    "build_sections",
    "ReportExporter",
    "ExportError",
]
