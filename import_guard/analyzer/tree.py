"""Walk source roots and collect banned imports."""

import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from ..errors import ConfigurationError, ScanIOError
from ..parsers import LineClassifier, LineScanner, get_classifier_for_file, get_registry
from ..utils.logging import get_logger, log_phase
from .groups import RuleGroup
from .matcher import match_file
from .models import AnalyzeResult, MatchedFile

logger = get_logger("tree")


@dataclass(frozen=True)
class AnalyzerSettings:
    """Roots to scan and how to read them."""

    src_directories: tuple[Path, ...] = ()
    test_directories: tuple[Path, ...] = ()
    encoding: str = "utf-8"
    parallel_workers: int = 1

    @property
    def all_directories(self) -> tuple[Path, ...]:
        return self.src_directories + self.test_directories

    def __str__(self) -> str:
        return (
            f"  src directories: {', '.join(map(str, self.src_directories)) or '-'}\n"
            f"  test directories: {', '.join(map(str, self.test_directories)) or '-'}\n"
            f"  encoding: {self.encoding}\n"
            f"  parallel workers: {self.parallel_workers}"
        )


class SourceTreeAnalyzer:
    """Finds banned imports in all supported files below the configured roots.

    Source and test roots are analyzed independently. Missing roots and files
    without a registered classifier are skipped; I/O failures on existing
    files abort the whole analysis.
    """

    def __init__(self, registry: Mapping[str, LineClassifier] | None = None):
        self.registry = registry if registry is not None else get_registry()
        if not self.registry:
            raise ConfigurationError("No line classifiers registered")

    def analyze(self, settings: AnalyzerSettings, groups: Iterable[RuleGroup]) -> AnalyzeResult:
        groups = list(groups)
        started = time.perf_counter()
        scanner = LineScanner(settings.encoding)

        src_matches = self.analyze_directories(
            settings.src_directories, groups, scanner, settings.parallel_workers
        )
        test_matches = self.analyze_directories(
            settings.test_directories, groups, scanner, settings.parallel_workers
        )

        return AnalyzeResult(
            src_matches=tuple(src_matches),
            test_matches=tuple(test_matches),
            duration_ms=int((time.perf_counter() - started) * 1000),
        )

    def analyze_directories(
        self,
        directories: Iterable[Path],
        groups: list[RuleGroup],
        scanner: LineScanner,
        parallel_workers: int = 1,
    ) -> list[MatchedFile]:
        matched_files: list[MatchedFile] = []
        for directory in directories:
            with log_phase(f"Analyzing {directory}", logger):
                files = self.list_files(directory)

                def analyze_file(path: Path) -> MatchedFile | None:
                    classifier = get_classifier_for_file(path, self.registry)
                    return match_file(scanner.parse(path, classifier), groups)

                if parallel_workers > 1 and len(files) > 1:
                    with ThreadPoolExecutor(max_workers=parallel_workers) as executor:
                        results = list(executor.map(analyze_file, files))
                else:
                    results = [analyze_file(path) for path in files]

                found = [result for result in results if result is not None]
                logger.info(
                    f"Analyzed {len(files)} files in {directory}, "
                    f"{len(found)} with banned imports"
                )
                matched_files.extend(found)
        return matched_files

    def list_files(self, root: Path) -> list[Path]:
        """List supported files below ``root``; a missing root yields nothing."""
        if not root.exists():
            logger.debug(f"Skipping missing directory {root}")
            return []
        if root.is_file():
            return [root] if self._is_supported(root) else []

        def fail(error: OSError) -> None:
            raise ScanIOError(
                root, f"Encountered I/O error while listing files of {root}: {error}"
            ) from error

        files: list[Path] = []
        for directory, _, names in os.walk(root, onerror=fail):
            files.extend(
                path for path in (Path(directory) / name for name in names)
                if self._is_supported(path)
            )
        return sorted(files)

    def _is_supported(self, path: Path) -> bool:
        if path.is_dir():
            return False
        return get_classifier_for_file(path, self.registry) is not None


def analyze(
    src_roots: Iterable[Path],
    test_roots: Iterable[Path],
    groups: Iterable[RuleGroup],
    *,
    encoding: str = "utf-8",
    parallel_workers: int = 1,
) -> AnalyzeResult:
    """Analyze source and test roots with the built-in classifiers."""
    settings = AnalyzerSettings(
        src_directories=tuple(Path(p) for p in src_roots),
        test_directories=tuple(Path(p) for p in test_roots),
        encoding=encoding,
        parallel_workers=parallel_workers,
    )
    return SourceTreeAnalyzer().analyze(settings, groups)
