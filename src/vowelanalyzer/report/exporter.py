"""PDF export of analysis results using reportlab."""

import os
import tempfile
from pathlib import Path

from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..analyzer import AnalysisResult
from ..utils.logging import get_logger
from .presenter import build_sections

logger = get_logger(__name__)

PAGE_SIZES = {"letter": letter, "A4": A4}


class ExportError(Exception):
    """Raised when the PDF report cannot be written."""

    pass


class ReportExporter:
    """
    Writes analysis results to a paginated PDF document.

    The document is first written to a temporary file next to the
    destination and moved into place once complete, so a failed export
    never leaves a truncated report behind.
    """

    TITLE = "Vowel Analysis Report"
    MARGIN = 60

    def __init__(self, page_size: str = "letter", font_size: int = 11):
        """
        Initialize the exporter.

        Args:
            page_size: Page size name ("letter" or "A4")
            font_size: Body text font size in points
        """
        if page_size not in PAGE_SIZES:
            raise ValueError(f"Unknown page size: {page_size}")
        self.page_size = PAGE_SIZES[page_size]
        self.font_size = font_size
        self.line_height = font_size + 5

    def _wrap(self, line: str, max_width: float) -> list[str]:
        """Split a line into pieces that fit max_width, breaking long words by character."""
        pieces: list[str] = []
        for piece in simpleSplit(line, "Helvetica", self.font_size, max_width) or [""]:
            current = ""
            for char in piece:
                if current and stringWidth(current + char, "Helvetica", self.font_size) > max_width:
                    pieces.append(current)
                    current = ""
                current += char
            pieces.append(current)
        return pieces

    def _render(self, result: AnalysisResult, pdf: canvas.Canvas):
        """Draw the title and every report section, breaking pages as needed."""
        width, height = self.page_size
        y = height - self.MARGIN
        max_width = width - 2 * self.MARGIN - 20

        def ensure_room(needed: float) -> float:
            if y - needed < self.MARGIN:
                pdf.showPage()
                return height - self.MARGIN
            return y

        pdf.setFont("Helvetica-Bold", self.font_size + 7)
        pdf.drawString(self.MARGIN, y, self.TITLE)
        y -= self.line_height * 2

        for section in build_sections(result):
            # Keep a heading together with at least its first line
            y = ensure_room(self.line_height * 2)
            pdf.setFont("Helvetica-Bold", self.font_size + 2)
            pdf.drawString(self.MARGIN, y, section.title)
            y -= self.line_height

            for line in section.lines:
                for piece in self._wrap(line, max_width):
                    y = ensure_room(self.line_height)
                    pdf.setFont("Helvetica", self.font_size)
                    pdf.drawString(self.MARGIN + 20, y, piece)
                    y -= self.line_height

            y -= self.line_height / 2

    def export(self, result: AnalysisResult, destination: Path) -> Path:
        """
        Export a result as a PDF report.

        Args:
            result: Analysis to export
            destination: Path of the PDF file to create or replace

        Returns:
            The path the report was written to

        Raises:
            ExportError: If the report cannot be written
        """
        destination = Path(destination)
        tmp_path: Path | None = None

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{destination.stem}-", suffix=".pdf.tmp", dir=destination.parent
            )
            os.close(fd)
            tmp_path = Path(tmp_name)

            pdf = canvas.Canvas(str(tmp_path), pagesize=self.page_size)
            pdf.setTitle(self.TITLE)
            self._render(result, pdf)
            pdf.save()

            os.replace(tmp_path, destination)
            logger.info(f"Exported report to {destination}")
            return destination

        except Exception as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise ExportError(f"Could not write report to {destination}: {e}") from e
