"""Main CLI interface for VowelAnalyzer using Click."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..analyzer import FileSource, InlineText
from ..config import ConfigManager, VowelAnalyzerConfig
from ..core import InteractiveShell, RunResult
from ..utils.logging import get_logger, setup_logging

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _load_config(ctx) -> VowelAnalyzerConfig:
    """Load configuration and apply its logging settings."""
    config_manager = ConfigManager(ctx.obj.get("config_path"))
    config = config_manager.load(create_if_missing=True)

    verbose = ctx.obj.get("verbose", False)
    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=verbose or config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )
    logger.debug(f"Configuration loaded from {config_manager.config_path or 'defaults'}")
    return config


def _run(action: Callable[[], RunResult]):
    """Run the pipeline and exit with a status reflecting the outcome."""
    try:
        result = action()
    except Exception as e:
        err_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        logger.exception("Analysis run error")
        sys.exit(1)
    sys.exit(0 if result.success else 1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="VowelAnalyzer")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool):
    """
    VowelAnalyzer - vowel and consonant statistics for text and documents.

    Run without a command to analyze typed text, or type "file" at the
    prompt to analyze a PDF, DOCX, ODT, CSV, JSON or plain text file.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        try:
            loaded = _load_config(ctx)
        except ValueError as e:
            err_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
            logger.exception("Config load error")
            sys.exit(1)

        shell = InteractiveShell(loaded, console=console, err_console=err_console)
        _run(shell.run)


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(path_type=Path),
    help="Analyze this file instead of TEXT",
)
@click.option(
    "--export/--no-export",
    default=False,
    help="Write the PDF report (default: no)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="PDF report path (overrides config)",
)
@click.pass_context
def analyze(ctx, text: Optional[str], file_path: Optional[Path], export: bool, output: Optional[Path]):
    """
    Analyze TEXT or a file without prompting.

    Examples:
        vowel-analyzer analyze "Hello World"
        vowel-analyzer analyze --file notes.docx --export
    """
    if (text is None) == (file_path is None):
        raise click.UsageError("Provide either TEXT or --file, but not both.")

    try:
        config = _load_config(ctx)
        if output is not None:
            config.export.output_path = output
    except ValueError as e:
        err_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        logger.exception("Config load error")
        sys.exit(1)

    source = InlineText(text) if file_path is None else FileSource(file_path)
    shell = InteractiveShell(config, console=console, err_console=err_console)
    _run(lambda: shell.process(source, export=export))


@cli.group(name="config")
def config_group():
    """Manage VowelAnalyzer configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    console.print("\n[bold cyan]VowelAnalyzer Configuration[/bold cyan]\n")

    try:
        config_manager = ConfigManager(ctx.obj.get("config_path"))
        config = config_manager.load(create_if_missing=True)

        console.print("[bold]Export:[/bold]")
        console.print(f"  Output Path: {escape(str(config.export.output_path))}")
        console.print(f"  Page Size: {config.export.page_size}")
        console.print(f"  Font Size: {config.export.font_size}")

        console.print("\n[bold]Logging:[/bold]")
        console.print(f"  Level: {config.logging.level}")
        console.print(f"  Log Dir: {escape(str(config.logging.log_dir))}")
        console.print(
            f"  Console: {'[green]Enabled[/green]' if config.logging.console_enabled else '[yellow]Disabled[/yellow]'}"
        )
        console.print(
            f"  File: {'[green]Enabled[/green]' if config.logging.file_enabled else '[yellow]Disabled[/yellow]'}"
        )

        source = config_manager.config_path or "(defaults)"
        console.print(f"\n[dim]Config file: {escape(str(source))}[/dim]")

    except Exception as e:
        err_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        logger.exception("Config show error")
        sys.exit(1)


@config_group.command(name="init")
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("vowel-analyzer.yaml"),
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(path: Path, force: bool):
    """Write a configuration file with default settings."""
    if path.exists() and not force:
        err_console.print(
            f"[yellow]⚠ {escape(str(path))} already exists.[/yellow] Use --force to overwrite."
        )
        sys.exit(1)

    try:
        ConfigManager().save(VowelAnalyzerConfig(), path)
        console.print(f"✓ Created default configuration: [green]{escape(str(path))}[/green]")
    except OSError as e:
        err_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        logger.exception("Config init error")
        sys.exit(1)


if __name__ == "__main__":
    cli()
