"""Interactive shell running one analysis pass from prompt to report."""

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from ..analyzer import (
    AnalysisResult,
    ExtractionError,
    FileSource,
    InlineText,
    RawInput,
    TextAnalyzer,
    extract_text,
)
from ..config.models import VowelAnalyzerConfig
from ..report import ExportError, ReportExporter, ReportPresenter
from ..utils.logging import get_logger

logger = get_logger(__name__)

FILE_KEYWORD = "file"


@dataclass
class RunResult:
    """Outcome of a single pass through the pipeline."""

    source: RawInput | None = None
    analysis: AnalysisResult | None = None
    export_path: Path | None = None

    success: bool = False
    error_message: str | None = None

    @property
    def exported(self) -> bool:
        """Check if a PDF report was written."""
        return self.export_path is not None


class InteractiveShell:
    """
    Drives one run of the pipeline.

    Pipeline: prompt -> extract -> analyze -> display -> optional export

    Input and output streams are injected so a run can be driven without a
    terminal.
    """

    def __init__(
        self,
        config: VowelAnalyzerConfig,
        console: Console | None = None,
        err_console: Console | None = None,
        stdin: TextIO | None = None,
    ):
        """
        Initialize the shell.

        Args:
            config: VowelAnalyzer configuration
            console: Console for prompts and the report
            err_console: Console for error messages
            stdin: Stream to read answers from (None reads the terminal)
        """
        self.config = config
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.stdin = stdin

        self.analyzer = TextAnalyzer()
        self.presenter = ReportPresenter()
        self.exporter = ReportExporter(
            page_size=config.export.page_size,
            font_size=config.export.font_size,
        )

    def _ask(self, prompt: str) -> str:
        return Prompt.ask(f"[cyan]{prompt}[/cyan]", console=self.console, stream=self.stdin)

    def read_source(self) -> RawInput:
        """
        Prompt for text, or for a file path when the user types "file".

        Returns:
            The raw input to analyze
        """
        answer = self._ask('Enter a paragraph or text (or type "file" to read from a file)')
        if answer.strip().lower() != FILE_KEYWORD:
            return InlineText(answer)

        file_path = self._ask("Enter the file path").strip().strip("\"'")
        return FileSource(Path(file_path).expanduser())

    def _confirm_export(self) -> bool:
        return Confirm.ask(
            f"[cyan]Export the report to[/cyan] {escape(str(self.config.export.output_path))}?",
            console=self.console,
            stream=self.stdin,
            default=False,
        )

    def _report_error(self, result: RunResult, title: str, error: Exception) -> RunResult:
        result.error_message = str(error)
        self.err_console.print(f"[bold red]✗ {title}:[/bold red] {escape(str(error))}")
        return result

    def process(self, source: RawInput, export: bool | None = None) -> RunResult:
        """
        Run a raw input through the pipeline.

        Args:
            source: Inline text or a file source
            export: Whether to write the PDF report; None asks the user

        Returns:
            RunResult describing what happened
        """
        result = RunResult(source=source)

        # Step 1: Extract
        try:
            text = extract_text(source)
        except ExtractionError as e:
            logger.error(f"Extraction failed: {e}")
            return self._report_error(result, "Error reading file", e)

        # Step 2: Analyze
        analysis = self.analyzer.analyze(text)
        result.analysis = analysis

        # Step 3: Display
        self.console.print()
        self.presenter.display(analysis, self.console)

        # Step 4: Optional export
        if export is None:
            export = self._confirm_export()

        if export:
            try:
                result.export_path = self.exporter.export(
                    analysis, self.config.export.output_path
                )
            except ExportError as e:
                logger.error(f"Export failed: {e}")
                return self._report_error(result, "Error exporting report", e)

            self.console.print(
                f"[green]✓[/green] Report saved to: [bold]{escape(str(result.export_path))}[/bold]"
            )

        result.success = True
        return result

    def run(self) -> RunResult:
        """Prompt for input and run it through the pipeline once."""
        return self.process(self.read_source())
