"""Analyzer module for text extraction and letter statistics."""

from .analyzer import AnalysisResult, TextAnalyzer, analyze_text, clean_text, tokenize_words
from .extractors import (
    BaseExtractor,
    CSVExtractor,
    DOCXExtractor,
    ExtractionError,
    FileSource,
    InlineText,
    JSONExtractor,
    ODTExtractor,
    PDFExtractor,
    PlainTextExtractor,
    RawInput,
    SourceFormat,
    extract_text,
    get_extractor,
    get_supported_extensions,
)

__all__ = [
    "TextAnalyzer",
    "AnalysisResult",
    "analyze_text",
    "clean_text",
    "tokenize_words",
    "BaseExtractor",
    "PlainTextExtractor",
    "PDFExtractor",
    "DOCXExtractor",
    "ODTExtractor",
    "CSVExtractor",
    "JSONExtractor",
    "ExtractionError",
    "FileSource",
    "InlineText",
    "RawInput",
    "SourceFormat",
    "extract_text",
    "get_extractor",
    "get_supported_extensions",
]
