"""Console rendering of analysis results."""

from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from ..analyzer import AnalysisResult


@dataclass(frozen=True)
class ReportSection:
    """A titled block of report lines."""

    title: str
    lines: tuple[str, ...]


def _format_frequencies(frequencies: dict[str, int]) -> tuple[str, ...]:
    if not frequencies:
        return ("(none)",)
    return tuple(f"{letter}: {count}" for letter, count in sorted(frequencies.items()))


def build_sections(result: AnalysisResult) -> list[ReportSection]:
    """
    Format an analysis result into report sections.

    This is the single place where figures are turned into text; the console
    presenter and the PDF exporter both render these sections.
    """
    longest_word = result.longest_word or "(none)"
    if result.most_vowels_word:
        most_vowels = f"{result.most_vowels_word} ({result.most_vowels_count} vowels)"
    else:
        most_vowels = "(none)"

    return [
        ReportSection(
            "Basic Statistics",
            (
                f"Total words: {result.total_words}",
                f"Total vowels: {result.total_vowels}",
                f"Total consonants: {result.total_consonants}",
                f"Total letters: {result.total_characters}",
                f"Total characters: {result.raw_character_count}",
                f"Average word length: {result.average_word_length:.2f}",
            ),
        ),
        ReportSection(
            "Interesting Findings",
            (
                f"Longest word: {longest_word}",
                f"Word with most vowels: {most_vowels}",
                f"Vowel percentage: {result.vowel_percentage:.2f}%",
            ),
        ),
        ReportSection("Vowel Breakdown", _format_frequencies(result.vowel_frequencies)),
        ReportSection("Consonant Breakdown", _format_frequencies(result.consonant_frequencies)),
    ]


class ReportPresenter:
    """Renders analysis results as console text."""

    def present(self, result: AnalysisResult) -> list[str]:
        """
        Render a result as display lines.

        Args:
            result: Analysis to render

        Returns:
            Section titles followed by their indented lines
        """
        lines: list[str] = []
        for section in build_sections(result):
            lines.append(f"{section.title}:")
            lines.extend(f"  {line}" for line in section.lines)
        return lines

    def display(self, result: AnalysisResult, console: Console):
        """Print a result to a Rich console, one table per section."""
        for section in build_sections(result):
            table = Table(
                title=f"[bold cyan]{section.title}[/bold cyan]",
                title_justify="left",
                show_header=False,
                box=None,
                padding=(0, 2),
            )
            table.add_column("Label", style="cyan")
            table.add_column("Value", style="green")

            for line in section.lines:
                label, sep, value = line.partition(": ")
                if sep:
                    table.add_row(label, value)
                else:
                    table.add_row(line, "")

            console.print(table)
            console.print()
