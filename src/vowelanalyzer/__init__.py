"""
VowelAnalyzer - vowel and consonant statistics for text and documents.

Reads typed text or PDF, DOCX, ODT, CSV, JSON and plain text files, reports
letter frequencies and word findings, and can export the report as a PDF.
"""

__version__ = "0.1.0"
__author__ = "VowelAnalyzer Team"
__license__ = "MIT"

from .utils.logging import get_logger

from .analyzer import AnalysisResult, ExtractionError, TextAnalyzer, extract_text
from .core import InteractiveShell, RunResult
from .report import ExportError, ReportExporter, ReportPresenter

__all__ = [
    "get_logger",
    # Analyzer
    "TextAnalyzer",
    "AnalysisResult",
    "ExtractionError",
    "extract_text",
    # Report
    "ReportPresenter",
    "ReportExporter",
    "ExportError",
    # Shell
    "InteractiveShell",
    "RunResult",
]
