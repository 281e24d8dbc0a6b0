"""Tests for import_guard/analyzer/tree.py - source tree analysis."""

import os
from pathlib import Path

import pytest

from import_guard.analyzer.groups import RuleGroup
from import_guard.analyzer.tree import AnalyzerSettings, SourceTreeAnalyzer, analyze
from import_guard.errors import ConfigurationError, ScanIOError
from import_guard.parsers.kotlin import KotlinLineClassifier


@pytest.fixture
def junit_groups() -> list[RuleGroup]:
    return [
        RuleGroup.create(
            base_packages=["de.skuzzle.**"],
            banned_imports=["org.junit.**"],
            reason="JUnit belongs in tests",
        )
    ]


def _roots(project: Path) -> tuple[Path, Path]:
    return project / "src" / "main" / "java", project / "src" / "test" / "java"


class TestSourceTreeAnalyzer:
    """Tests for SourceTreeAnalyzer."""

    def test_source_only(self, java_project: Path, junit_groups):
        src, _ = _roots(java_project)
        settings = AnalyzerSettings(src_directories=(src,))

        result = SourceTreeAnalyzer().analyze(settings, junit_groups)

        assert result.banned_imports_found
        assert result.test_matches == ()
        assert len(result.src_matches) == 1
        matched_file = result.src_matches[0]
        assert matched_file.path.name == "Service.java"
        assert [(m.line_number, m.import_name) for m in matched_file.matched_imports] == [
            (11, "org.junit.Test")
        ]
        assert matched_file.matched_imports[0].reason == "JUnit belongs in tests"

    def test_source_and_tests_kept_apart(self, java_project: Path, junit_groups):
        src, test = _roots(java_project)
        settings = AnalyzerSettings(src_directories=(src,), test_directories=(test,))

        result = SourceTreeAnalyzer().analyze(settings, junit_groups)

        assert [m.path.name for m in result.src_matches] == ["Service.java"]
        assert [m.path.name for m in result.test_matches] == ["ServiceTest.java"]
        assert result.banned_imports_in_tests
        assert result.banned_import_count == 2

    def test_no_banned_imports(self, java_project: Path):
        src, test = _roots(java_project)
        groups = [RuleGroup.create(base_packages=["**"], banned_imports=["com.google.**"])]

        result = analyze([src], [test], groups)

        assert not result.banned_imports_found
        assert result.banned_import_count == 0

    def test_missing_root(self, temp_dir: Path, junit_groups):
        result = analyze([temp_dir / "does-not-exist"], [], junit_groups)

        assert result.src_matches == ()

    def test_list_files_filters_and_sorts(self, java_project: Path):
        src, _ = _roots(java_project)

        files = SourceTreeAnalyzer().list_files(src)

        assert [f.name for f in files] == ["Clean.java", "Service.java"]

    def test_root_can_be_a_file(self, java_project: Path, junit_groups):
        src, _ = _roots(java_project)
        service = src / "de" / "skuzzle" / "app" / "Service.java"

        result = analyze([service], [], junit_groups)

        assert len(result.src_matches) == 1

    def test_parallel_matches_sequential(self, java_project: Path, junit_groups):
        src, test = _roots(java_project)

        sequential = analyze([src], [test], junit_groups)
        parallel = analyze([src], [test], junit_groups, parallel_workers=4)

        assert parallel == sequential

    def test_unreadable_file_aborts(self, java_project: Path, junit_groups):
        src, _ = _roots(java_project)
        (src / "Broken.java").write_bytes(b"package x;\nimport \xff;\n")

        with pytest.raises(ScanIOError):
            analyze([src], [], junit_groups)

    def test_unlistable_directory_aborts(self, java_project: Path, junit_groups, monkeypatch):
        src, _ = _roots(java_project)
        hidden = src / "de" / "skuzzle" / "hidden"
        hidden.mkdir()
        (hidden / "Hidden.java").write_text(
            "package de.skuzzle.hidden;\nimport org.junit.Test;\n", encoding="utf-8"
        )
        real_scandir = os.scandir

        def scandir(path="."):
            if Path(path) == hidden:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

        with pytest.raises(ScanIOError) as exc_info:
            analyze([src], [], junit_groups)

        assert exc_info.value.path == src
        assert "Permission denied" in str(exc_info.value)

    def test_custom_registry(self, java_project: Path, junit_groups):
        src, _ = _roots(java_project)
        (src / "Extra.kt").write_text("package de.skuzzle.kt\nimport org.junit.Test\n")

        analyzer = SourceTreeAnalyzer({".kt": KotlinLineClassifier()})
        result = analyzer.analyze(AnalyzerSettings(src_directories=(src,)), junit_groups)

        assert [m.path.name for m in result.src_matches] == ["Extra.kt"]

    def test_empty_registry(self):
        with pytest.raises(ConfigurationError, match="No line classifiers"):
            SourceTreeAnalyzer({})


class TestAnalyzerSettings:
    """Tests for AnalyzerSettings."""

    def test_all_directories(self):
        settings = AnalyzerSettings(
            src_directories=(Path("a"),), test_directories=(Path("b"),)
        )

        assert settings.all_directories == (Path("a"), Path("b"))
        assert "encoding: utf-8" in str(settings)
