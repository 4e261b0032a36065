"""Text analyzer component for vowel, consonant and word statistics."""

import re
from collections import Counter
from dataclasses import dataclass, field

from ..utils.logging import get_logger

logger = get_logger(__name__)

VOWELS = frozenset("aeiou")
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

_NON_LETTER_RE = re.compile(r"[^a-z]+")
# ASCII word characters: letters, digits and underscore
_WORD_RE = re.compile(r"\w+", re.ASCII)


@dataclass(frozen=True)
class AnalysisResult:
    """Result of analyzing a piece of text."""

    # Letter frequencies, nonzero entries only, in alphabetical order
    vowel_frequencies: dict[str, int] = field(default_factory=dict)
    consonant_frequencies: dict[str, int] = field(default_factory=dict)

    # Totals
    total_vowels: int = 0
    total_consonants: int = 0
    total_characters: int = 0  # letters left after cleaning
    total_words: int = 0
    raw_character_count: int = 0

    # Findings
    average_word_length: float = 0.0
    longest_word: str = ""
    most_vowels_word: str = ""
    most_vowels_count: int = 0
    vowel_percentage: float = 0.0

    @property
    def has_letters(self) -> bool:
        """Check if the text contained any ASCII letters."""
        return self.total_characters > 0


def clean_text(text: str) -> str:
    """Lowercase the text and keep only the letters a-z."""
    return _NON_LETTER_RE.sub("", text.lower())


def tokenize_words(text: str) -> list[str]:
    """Split text into maximal runs of ASCII word characters."""
    return _WORD_RE.findall(text)


def count_vowels(word: str) -> int:
    """Count vowel characters in a word, case-insensitively."""
    return sum(1 for char in word.lower() if char in VOWELS)


class TextAnalyzer:
    """
    Computes letter frequencies and word findings for a text.

    Letter statistics are taken from the cleaned text, word statistics from
    the original text, so the two populations can differ (digits and
    underscores count towards words but not towards letters).
    """

    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze a text.

        Args:
            text: Any text, possibly empty

        Returns:
            AnalysisResult with all counts and findings
        """
        cleaned = clean_text(text)
        letter_counts = Counter(cleaned)

        vowel_frequencies = {
            letter: count for letter, count in sorted(letter_counts.items()) if letter in VOWELS
        }
        consonant_frequencies = {
            letter: count for letter, count in sorted(letter_counts.items()) if letter in CONSONANTS
        }
        total_vowels = sum(vowel_frequencies.values())
        total_consonants = sum(consonant_frequencies.values())
        total_characters = len(cleaned)

        words = tokenize_words(text)
        # max() keeps the first of equally ranked words
        longest_word = max(words, key=len, default="")
        most_vowels_word = max(words, key=count_vowels, default="")

        average_word_length = total_characters / len(words) if words else 0.0
        vowel_percentage = total_vowels / total_characters * 100 if total_characters else 0.0

        logger.debug(
            f"Analyzed {len(text)} chars: {len(words)} words, "
            f"{total_vowels} vowels, {total_consonants} consonants"
        )

        return AnalysisResult(
            vowel_frequencies=vowel_frequencies,
            consonant_frequencies=consonant_frequencies,
            total_vowels=total_vowels,
            total_consonants=total_consonants,
            total_characters=total_characters,
            total_words=len(words),
            raw_character_count=len(text),
            average_word_length=average_word_length,
            longest_word=longest_word,
            most_vowels_word=most_vowels_word,
            most_vowels_count=count_vowels(most_vowels_word),
            vowel_percentage=vowel_percentage,
        )


def analyze_text(text: str) -> AnalysisResult:
    """Analyze a text with a default TextAnalyzer."""
    return TextAnalyzer().analyze(text)
