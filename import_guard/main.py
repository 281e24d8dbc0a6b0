"""CLI entry point for Import Guard."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .analyzer.pattern import Pattern
from .analyzer.tree import SourceTreeAnalyzer
from .config import load_config
from .errors import ImportGuardError, PatternSyntaxError
from .parsers import get_registry
from .reporting import format_matches, print_summary
from .utils.logging import effective_level, get_logger, setup_logging

app = typer.Typer(
    name="import-guard",
    help="Detect banned imports in JVM source trees",
    add_completion=False,
)
console = Console()
logger = get_logger("cli")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"import-guard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """Import Guard - keep unwanted dependencies out of your code base."""
    pass


@app.command()
def check(
    project_root: Annotated[
        Path,
        typer.Argument(
            help="Project root the scan directories are relative to",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = Path("."),
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path"),
    ] = None,
    src: Annotated[
        Optional[list[Path]],
        typer.Option("--src", "-s", help="Source directory (repeatable)"),
    ] = None,
    test: Annotated[
        Optional[list[Path]],
        typer.Option("--test", "-t", help="Test directory (repeatable)"),
    ] = None,
    include_tests: Annotated[
        Optional[bool],
        typer.Option("--include-tests/--exclude-tests", help="Also scan test directories"),
    ] = None,
    fail: Annotated[
        Optional[bool],
        typer.Option("--fail/--no-fail", help="Exit with an error when banned imports are found"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Scan a project for banned imports.

    Exits with 1 when banned imports are found (unless --no-fail) and with 2
    on configuration or I/O errors.
    """
    try:
        config = load_config(config_file)
    except ImportGuardError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    setup_logging(effective_level(config.log_level, verbose), config.log_file)

    if config.skip:
        logger.info("import-guard check is skipped")
        return

    if src:
        config.scan.src_dirs = src
    if test:
        config.scan.test_dirs = test
    if include_tests is not None:
        config.scan.include_test_code = include_tests
    if fail is not None:
        config.fail_build = fail

    try:
        groups = config.build_groups()
        logger.debug(f"Banned import groups:\n{groups}")

        settings = config.analyzer_settings(project_root)
        logger.debug(f"Analyzer settings:\n{settings}")

        result = SourceTreeAnalyzer().analyze(settings, groups)
    except ImportGuardError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    if not result.banned_imports_found:
        console.print("[green]No banned imports found[/green]")
        return

    message = format_matches(settings.all_directories, result)
    if config.fail_build:
        typer.echo(message)
        if verbose:
            print_summary(settings.all_directories, result, console)
        raise typer.Exit(1)

    logger.warning(message)
    logger.warning(
        "Detected banned imports will not fail the build as the 'fail_build' flag is set to false!"
    )


@app.command()
def match(
    pattern: Annotated[str, typer.Argument(help="Package pattern, e.g. 'com.foo.**'")],
    names: Annotated[list[str], typer.Argument(help="Fully qualified names to test")],
) -> None:
    """Show which names a pattern matches."""
    try:
        parsed = Pattern.parse(pattern)
    except PatternSyntaxError as e:
        console.print(f"[bold red]Invalid pattern:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    for name in names:
        verdict = "match" if parsed.matches(name) else "no match"
        typer.echo(f"{verdict}\t{name}")


@app.command()
def languages() -> None:
    """List file extensions with a registered line classifier."""
    table = Table(title="Supported Languages")
    table.add_column("Extension", style="cyan")
    table.add_column("Classifier")

    for extension, classifier in sorted(get_registry().items()):
        table.add_row(extension, classifier.name)

    console.print(Panel(table, title="Import Guard"))


if __name__ == "__main__":
    app()
