"""Tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from vowelanalyzer.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


class TestInteractiveCommand:
    """Tests for running without a subcommand."""

    def test_inline_text_declined_export(self, runner):
        """Test an interactive run on typed text."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [], input="Hello World\nn\n")

            assert result.exit_code == 0
            assert "Total vowels" in result.output
            assert "30.00%" in result.output
            assert not Path("vowel-analysis.pdf").exists()

    def test_inline_text_with_export(self, runner):
        """Test that accepting the export writes the default report file."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [], input="Hello World\ny\n")

            assert result.exit_code == 0
            assert Path("vowel-analysis.pdf").exists()

    def test_missing_file_exits_with_error(self, runner):
        """Test that a missing file ends the run with status 1 and a message."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [], input="file\nnope.txt\n")

            assert result.exit_code == 1
            assert "Error reading file" in result.output
            assert "Traceback" not in result.output

    def test_uses_config_output_path(self, runner):
        """Test that the configured output path is used for export."""
        with runner.isolated_filesystem():
            Path("custom.yaml").write_text(
                yaml.safe_dump({"export": {"output_path": "out/report.pdf"}})
            )
            Path("out").mkdir()

            result = runner.invoke(cli, ["--config", "custom.yaml"], input="Hello\ny\n")

            assert result.exit_code == 0
            assert Path("out/report.pdf").exists()

    def test_invalid_config_exits_with_error(self, runner):
        """Test that an invalid configuration is reported."""
        with runner.isolated_filesystem():
            Path("bad.yaml").write_text("unknown_key: 1\n")

            result = runner.invoke(cli, ["--config", "bad.yaml"], input="Hello\nn\n")

            assert result.exit_code == 1
            assert "Invalid configuration" in result.output

    def test_unexpected_error_exits_cleanly(self, runner):
        """Test that an unexpected failure during an interactive run is reported."""
        with runner.isolated_filesystem():
            with patch(
                "vowelanalyzer.cli.main.InteractiveShell.run",
                side_effect=RuntimeError("boom"),
            ):
                result = runner.invoke(cli, [], input="Hello\nn\n")

            assert result.exit_code == 1
            assert "✗ Error" in result.output
            assert "Traceback" not in result.output

    def test_verbose_logs_to_stderr(self, runner):
        """Test that --verbose turns on debug logging."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["-v", "analyze", "Hello"])

            assert result.exit_code == 0
            assert "DEBUG" in result.output
            assert "Configuration" in result.output

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestAnalyzeCommand:
    """Tests for the analyze subcommand."""

    def test_analyze_text(self, runner):
        """Test analyzing inline text without prompts."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["analyze", "aeiou AEIOU"])

            assert result.exit_code == 0
            assert "100.00%" in result.output
            assert not Path("vowel-analysis.pdf").exists()

    def test_analyze_file_with_export(self, runner):
        """Test analyzing a file and exporting to a chosen path."""
        with runner.isolated_filesystem():
            Path("data.json").write_text('{"greeting": "Hello"}')

            result = runner.invoke(
                cli, ["analyze", "--file", "data.json", "--export", "--output", "report.pdf"]
            )

            assert result.exit_code == 0
            assert Path("report.pdf").exists()
            assert "Report saved to" in result.output

    def test_analyze_corrupted_pdf(self, runner):
        """Test that a corrupted PDF exits with status 1."""
        with runner.isolated_filesystem():
            Path("bad.pdf").write_bytes(b"garbage")

            result = runner.invoke(cli, ["analyze", "--file", "bad.pdf"])

            assert result.exit_code == 1
            assert "Error reading file" in result.output

    def test_analyze_deeply_nested_json(self, runner):
        """Test that deeply nested JSON exits with status 1 and no traceback."""
        with runner.isolated_filesystem():
            Path("deep.json").write_text("[" * 100000 + "]" * 100000)

            result = runner.invoke(cli, ["analyze", "--file", "deep.json"])

            assert result.exit_code == 1
            assert "Error reading file" in result.output
            assert "Traceback" not in result.output

    def test_unexpected_error_exits_cleanly(self, runner):
        """Test that an unexpected failure is reported instead of crashing."""
        with runner.isolated_filesystem():
            with patch(
                "vowelanalyzer.cli.main.InteractiveShell.process",
                side_effect=RuntimeError("boom"),
            ):
                result = runner.invoke(cli, ["analyze", "Hello"])

            assert result.exit_code == 1
            assert "✗ Error" in result.output
            assert "boom" in result.output
            assert "Traceback" not in result.output
            assert not isinstance(result.exception, RuntimeError)

    def test_analyze_requires_one_source(self, runner):
        """Test that TEXT and --file are mutually exclusive and one is required."""
        result = runner.invoke(cli, ["analyze"])
        assert result.exit_code == 2

        result = runner.invoke(cli, ["analyze", "text", "--file", "x.txt"])
        assert result.exit_code == 2


class TestConfigCommands:
    """Tests for the config subcommands."""

    def test_init_writes_defaults(self, runner):
        """Test that config init writes a loadable file."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])

            assert result.exit_code == 0
            data = yaml.safe_load(Path("vowel-analyzer.yaml").read_text())
            assert data["export"]["output_path"] == "vowel-analysis.pdf"
            assert data["logging"]["level"] == "INFO"

    def test_init_refuses_to_overwrite(self, runner):
        """Test that an existing file is kept without --force."""
        with runner.isolated_filesystem():
            Path("vowel-analyzer.yaml").write_text("export: {}\n")

            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 1
            assert Path("vowel-analyzer.yaml").read_text() == "export: {}\n"

            result = runner.invoke(cli, ["config", "init", "--force"])
            assert result.exit_code == 0

    def test_show(self, runner):
        """Test displaying the configuration."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "show"])

            assert result.exit_code == 0
            assert "vowel-analysis.pdf" in result.output
            assert "letter" in result.output
