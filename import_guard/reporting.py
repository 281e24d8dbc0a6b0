"""Human readable output for analysis results."""

from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .analyzer.models import AnalyzeResult, MatchedFile


def relativize(roots: Iterable[Path], path: Path) -> Path:
    """Path relative to the first root containing it, else unchanged."""
    for root in roots:
        try:
            return path.relative_to(root)
        except ValueError:
            continue
    return path


def _format_files(roots: list[Path], matched_files: Iterable[MatchedFile]) -> list[str]:
    lines: list[str] = []
    for matched_file in matched_files:
        lines.append(f"\tin file: {relativize(roots, matched_file.path).as_posix()}")
        for matched in matched_file.matched_imports:
            lines.append(
                f"\t\t{matched.import_name} \t(Line: {matched.line_number}, "
                f"Matched by: {matched.matched_by})"
            )
            if matched.reason:
                lines.append(f"\t\t\tReason: {matched.reason}")
    return lines


def format_matches(roots: Iterable[Path], result: AnalyzeResult) -> str:
    """Render the banned imports of a result as plain text."""
    roots = list(roots)
    lines: list[str] = []
    if result.banned_imports_in_src:
        lines.append("\nBanned imports detected:\n")
        lines.extend(_format_files(roots, result.src_matches))
    if result.banned_imports_in_tests:
        lines.append("\nBanned imports detected in TEST code:\n")
        lines.extend(_format_files(roots, result.test_matches))
    if result.banned_imports_found:
        lines.append(f"\nAnalysis took {result.duration_ms} ms")
    return "\n".join(lines)


def print_summary(
    roots: Iterable[Path], result: AnalyzeResult, console: Console | None = None
) -> None:
    """Print a table of all banned imports."""
    console = console or Console()
    roots = list(roots)

    table = Table(title="Banned Imports")
    table.add_column("Scope", style="cyan")
    table.add_column("File")
    table.add_column("Line", justify="right")
    table.add_column("Import", style="red")
    table.add_column("Matched by", style="yellow")
    table.add_column("Reason", style="dim")

    for scope, matched_files in (("src", result.src_matches), ("test", result.test_matches)):
        for matched_file in matched_files:
            path = relativize(roots, matched_file.path).as_posix()
            for matched in matched_file.matched_imports:
                table.add_row(
                    scope,
                    escape(path),
                    str(matched.line_number),
                    escape(matched.import_name),
                    escape(str(matched.matched_by)),
                    escape(matched.reason or ""),
                )

    console.print(table)
