"""Value objects produced while scanning and matching source files."""

from dataclasses import dataclass, field
from pathlib import Path

from .pattern import Pattern


@dataclass(frozen=True)
class ImportStatement:
    """A fully qualified import name and the line it was found on."""

    name: str
    line_number: int

    @property
    def is_static(self) -> bool:
        return self.name.startswith("static ")


@dataclass(frozen=True)
class ParsedFile:
    """Package and leading imports extracted from one source file."""

    path: Path
    package_name: str
    fqcn: str
    imports: tuple[ImportStatement, ...] = ()


@dataclass(frozen=True)
class MatchedImport:
    """An import that was banned, with the pattern that banned it."""

    line_number: int
    import_name: str
    matched_by: Pattern
    reason: str | None = None


@dataclass(frozen=True)
class MatchedFile:
    """A parsed file together with its banned imports."""

    source_file: ParsedFile
    matched_imports: tuple[MatchedImport, ...]

    @property
    def path(self) -> Path:
        return self.source_file.path


@dataclass(frozen=True)
class AnalyzeResult:
    """Matches found in source and test roots."""

    src_matches: tuple[MatchedFile, ...] = ()
    test_matches: tuple[MatchedFile, ...] = ()
    duration_ms: int = field(default=0, compare=False)

    @property
    def banned_imports_in_src(self) -> bool:
        return bool(self.src_matches)

    @property
    def banned_imports_in_tests(self) -> bool:
        return bool(self.test_matches)

    @property
    def banned_imports_found(self) -> bool:
        return self.banned_imports_in_src or self.banned_imports_in_tests

    @property
    def banned_import_count(self) -> int:
        return sum(
            len(matched.matched_imports)
            for matched in (*self.src_matches, *self.test_matches)
        )
