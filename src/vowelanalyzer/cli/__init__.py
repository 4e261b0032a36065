"""Command-line interface for VowelAnalyzer."""
