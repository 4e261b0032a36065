"""Text extractors for inline input and different file types."""

import csv
import io
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..utils.logging import get_logger

logger = get_logger(__name__)


class ExtractionError(Exception):
    """Raised when text extraction fails."""

    pass


class SourceFormat(str, Enum):
    """Closed set of formats a file source can be decoded as."""

    PDF = "pdf"
    DOCX = "docx"
    ODT = "odt"
    CSV = "csv"
    JSON = "json"
    PLAIN = "plain"

    @classmethod
    def from_path(cls, file_path: Path) -> "SourceFormat":
        """Map a file extension (case-insensitive) to a format, defaulting to plain text."""
        suffix = Path(file_path).suffix.lower().lstrip(".")
        for source_format in cls:
            if source_format is not cls.PLAIN and source_format.value == suffix:
                return source_format
        return cls.PLAIN


@dataclass(frozen=True)
class InlineText:
    """Text typed directly by the user."""

    text: str


@dataclass(frozen=True)
class FileSource:
    """A file whose text should be extracted."""

    path: Path

    @property
    def format(self) -> SourceFormat:
        return SourceFormat.from_path(self.path)


RawInput = InlineText | FileSource


class BaseExtractor(ABC):
    """Base class for text extractors."""

    @property
    @abstractmethod
    def source_format(self) -> SourceFormat:
        """Return the format this extractor decodes."""
        pass

    @abstractmethod
    def extract(self, file_path: Path) -> str:
        """
        Extract text content from a file.

        Args:
            file_path: Path to the file

        Returns:
            Extracted text content

        Raises:
            ExtractionError: If extraction fails
        """
        pass


ENCODINGS = ["utf-8", "utf-8-sig", "latin-1", "cp1252"]


def read_text_file(file_path: Path, newline: str | None = None) -> str:
    """
    Read a text file, trying each of ENCODINGS in turn.

    Raises:
        ExtractionError: If the file cannot be read or decoded
    """
    try:
        # Try UTF-8 first, then fall back to other encodings
        for encoding in ENCODINGS:
            try:
                with open(file_path, "r", encoding=encoding, newline=newline) as f:
                    content = f.read()
                logger.debug(f"Read {file_path} using {encoding}")
                return content
            except UnicodeDecodeError:
                continue

        raise ExtractionError(f"Could not decode file with any supported encoding: {file_path}")

    except OSError as e:
        raise ExtractionError(f"Could not read file {file_path}: {e}") from e


class PlainTextExtractor(BaseExtractor):
    """Extractor for plain text files, used for any unrecognized extension."""

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.PLAIN

    def extract(self, file_path: Path) -> str:
        """Extract text from plain text files."""
        return read_text_file(file_path)


class PDFExtractor(BaseExtractor):
    """Extractor for PDF files using PyMuPDF (fitz)."""

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.PDF

    def extract(self, file_path: Path) -> str:
        """Extract text from PDF files."""
        try:
            import fitz  # PyMuPDF
        except ImportError as e:
            raise ExtractionError(
                "PyMuPDF (fitz) is not installed. Install with: pip install pymupdf"
            ) from e

        try:
            text_parts: list[str] = []

            with fitz.open(file_path) as doc:
                for page_num, page in enumerate(doc):
                    page_text = page.get_text()
                    if page_text.strip():
                        text_parts.append(page_text)
                        logger.debug(f"Extracted {len(page_text)} chars from page {page_num + 1}")

            full_text = "\n\n".join(text_parts)
            logger.debug(f"Extracted {len(full_text)} total chars from PDF: {file_path}")

            return full_text

        except Exception as e:
            raise ExtractionError(f"Failed to extract text from PDF {file_path}: {e}") from e


class DOCXExtractor(BaseExtractor):
    """Extractor for DOCX files using python-docx."""

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.DOCX

    def extract(self, file_path: Path) -> str:
        """Extract text from DOCX files."""
        try:
            from docx import Document
        except ImportError as e:
            raise ExtractionError(
                "python-docx is not installed. Install with: pip install python-docx"
            ) from e

        try:
            doc = Document(str(file_path))
            text_parts: list[str] = []

            for paragraph in doc.paragraphs:
                if paragraph.text.strip():
                    text_parts.append(paragraph.text)

            for table in doc.tables:
                for row in table.rows:
                    row_text = " | ".join(cell.text.strip() for cell in row.cells if cell.text.strip())
                    if row_text:
                        text_parts.append(row_text)

            full_text = "\n".join(text_parts)
            logger.debug(f"Extracted {len(full_text)} chars from DOCX: {file_path}")

            return full_text

        except Exception as e:
            raise ExtractionError(f"Failed to extract text from DOCX {file_path}: {e}") from e


class ODTExtractor(BaseExtractor):
    """Extractor for OpenDocument text files using odfpy."""

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.ODT

    def extract(self, file_path: Path) -> str:
        """Extract headings and paragraphs from ODT files, in document order."""
        try:
            from odf import teletype
            from odf.namespaces import TEXTNS
            from odf.opendocument import load
        except ImportError as e:
            raise ExtractionError("odfpy is not installed. Install with: pip install odfpy") from e

        block_names = {(TEXTNS, "h"), (TEXTNS, "p")}

        def iter_blocks(node):
            for child in getattr(node, "childNodes", ()):
                if getattr(child, "qname", None) in block_names:
                    yield child
                else:
                    yield from iter_blocks(child)

        try:
            doc = load(str(file_path))
            text_parts = [teletype.extractText(block) for block in iter_blocks(doc.text)]

            full_text = "\n".join(part for part in text_parts if part.strip())
            logger.debug(f"Extracted {len(full_text)} chars from ODT: {file_path}")

            return full_text

        except Exception as e:
            raise ExtractionError(f"Failed to extract text from ODT {file_path}: {e}") from e


class CSVExtractor(BaseExtractor):
    """
    Extractor for CSV files.

    Rows are read as records keyed by the header row and re-serialized as a
    compact JSON array, so header names count towards the analysis.
    """

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.CSV

    def extract(self, file_path: Path) -> str:
        """Extract CSV records as JSON text."""
        content = read_text_file(file_path, newline="")
        try:
            records = list(csv.DictReader(io.StringIO(content, newline="")))
        except csv.Error as e:
            raise ExtractionError(f"Failed to read CSV {file_path}: {e}") from e

        logger.debug(f"Read {len(records)} rows from CSV: {file_path}")
        # Extra cells land under a None key, which JSON needs as a string
        records = [
            {("" if key is None else key): value for key, value in record.items()}
            for record in records
        ]
        return json.dumps(records, ensure_ascii=False, separators=(",", ":"))


class JSONExtractor(BaseExtractor):
    """Extractor for JSON files: parsed to validate, then re-serialized compactly."""

    @property
    def source_format(self) -> SourceFormat:
        return SourceFormat.JSON

    def extract(self, file_path: Path) -> str:
        """Extract canonical JSON text."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ExtractionError(f"Could not read file {file_path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise ExtractionError(f"Invalid JSON in {file_path}: {e}") from e
        except RecursionError as e:
            raise ExtractionError(f"JSON in {file_path} is nested too deeply: {e}") from e

        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


# Strategy table of all available extractors; plain text is the default
EXTRACTORS: dict[SourceFormat, BaseExtractor] = {
    extractor.source_format: extractor
    for extractor in [
        PlainTextExtractor(),
        PDFExtractor(),
        DOCXExtractor(),
        ODTExtractor(),
        CSVExtractor(),
        JSONExtractor(),
    ]
}


def get_extractor(file_path: Path) -> BaseExtractor:
    """
    Get the appropriate extractor for a file.

    Args:
        file_path: Path to the file

    Returns:
        Extractor for the file's format, or the plain text extractor
    """
    return EXTRACTORS[SourceFormat.from_path(file_path)]


def get_supported_extensions() -> set[str]:
    """Get the file extensions with a dedicated (non plain text) extractor."""
    return {f".{source_format.value}" for source_format in EXTRACTORS if source_format is not SourceFormat.PLAIN}


def extract_text(source: RawInput) -> str:
    """
    Produce plain text from a raw input.

    Args:
        source: Inline text or a file source

    Returns:
        The text to analyze

    Raises:
        ExtractionError: If the file cannot be read or decoded
    """
    if isinstance(source, InlineText):
        return source.text

    extractor = get_extractor(source.path)
    logger.info(f"Extracting {source.path} as {extractor.source_format.value}")
    return extractor.extract(source.path)
