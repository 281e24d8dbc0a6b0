"""Tests for import_guard/parsers - line classifiers and their registry."""

from pathlib import Path

import pytest

from import_guard.analyzer.models import ImportStatement
from import_guard.errors import ConfigurationError
from import_guard.parsers import get_classifier_for_file, get_registry
from import_guard.parsers.base import LineClassifier, file_extension, register_classifier
from import_guard.parsers.groovy import GroovyLineClassifier
from import_guard.parsers.java import JavaLineClassifier
from import_guard.parsers.kotlin import KotlinLineClassifier

# ============================================================================
# Registry Tests
# ============================================================================


class TestClassifierRegistry:
    """Tests for classifier registration and lookup."""

    def test_builtin_extensions(self):
        registry = get_registry()

        assert {".java", ".kt", ".kts", ".groovy"} <= set(registry)

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_classifier_for_file(Path("Foo.JAVA")), JavaLineClassifier)
        assert isinstance(get_classifier_for_file(Path("build.gradle.kts")), KotlinLineClassifier)

    def test_unknown_extension(self):
        assert get_classifier_for_file(Path("notes.txt")) is None
        assert get_classifier_for_file(Path("Makefile")) is None

    def test_file_extension(self):
        assert file_extension(Path("a/B.Groovy")) == ".groovy"
        assert file_extension(Path("README")) is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            get_registry()[".foo"] = JavaLineClassifier()  # type: ignore[index]

    def test_duplicate_extension_rejected(self):
        class DuplicateJava(LineClassifier):
            name = "duplicate"
            file_extensions = ("JAVA",)

            def try_parse_package(self, line):
                return None

            def try_parse_import(self, line, line_number):
                return []

        with pytest.raises(ConfigurationError, match=r"multiple parsers.*\.java"):
            register_classifier(DuplicateJava)


# ============================================================================
# Java Tests
# ============================================================================


class TestJavaLineClassifier:
    """Tests for Java package and import lines."""

    @pytest.fixture
    def subject(self) -> JavaLineClassifier:
        return JavaLineClassifier()

    def test_valid_import(self, subject):
        assert subject.try_parse_import("import java.util.List;", 1) == [
            ImportStatement("java.util.List", 1)
        ]

    def test_import_without_semicolon(self, subject):
        assert subject.try_parse_import("import java.util.List", 1) == []

    def test_import_without_space(self, subject):
        assert subject.try_parse_import("importjava.util.List;", 1) == []

    def test_static_import(self, subject):
        assert subject.try_parse_import("import static org.junit.Assert.assertTrue;", 4) == [
            ImportStatement("static org.junit.Assert.assertTrue", 4)
        ]

    def test_wildcard_import(self, subject):
        assert subject.try_parse_import("import java.util.*;", 2) == [
            ImportStatement("java.util.*", 2)
        ]

    def test_multiple_imports_on_one_line(self, subject):
        assert subject.try_parse_import("import a.B; import c.D;", 7) == [
            ImportStatement("a.B", 7),
            ImportStatement("c.D", 7),
        ]

    def test_code_line(self, subject):
        assert subject.try_parse_import("public class Foo {", 3) == []

    def test_package(self, subject):
        assert subject.try_parse_package("package a.b.c.d;") == "a.b.c.d"

    @pytest.mark.parametrize("line", ["packagea.b.c.d;", "package a.b.c.d", ""])
    def test_invalid_package(self, subject, line):
        assert subject.try_parse_package(line) is None


# ============================================================================
# Kotlin Tests
# ============================================================================


class TestKotlinLineClassifier:
    """Tests for Kotlin package and import lines."""

    @pytest.fixture
    def subject(self) -> KotlinLineClassifier:
        return KotlinLineClassifier()

    def test_package_without_semicolon(self, subject):
        assert subject.try_parse_package("package de.skuzzle.kt") == "de.skuzzle.kt"

    def test_package_with_semicolon(self, subject):
        assert subject.try_parse_package("package de.skuzzle.kt;") == "de.skuzzle.kt"

    def test_import(self, subject):
        assert subject.try_parse_import("import kotlin.collections.List", 3) == [
            ImportStatement("kotlin.collections.List", 3)
        ]

    def test_aliased_import(self, subject):
        assert subject.try_parse_import("import java.util.Vector as JVector", 4) == [
            ImportStatement("java.util.Vector", 4)
        ]

    def test_backticked_import(self, subject):
        assert subject.try_parse_import("import com.`fun`.Thing", 1) == [
            ImportStatement("com.fun.Thing", 1)
        ]

    def test_code_line(self, subject):
        assert subject.try_parse_import("class Sample", 6) == []
        assert subject.try_parse_package("class Sample") is None


# ============================================================================
# Groovy Tests
# ============================================================================


class TestGroovyLineClassifier:
    """Tests for Groovy package and import lines."""

    @pytest.fixture
    def subject(self) -> GroovyLineClassifier:
        return GroovyLineClassifier()

    def test_package(self, subject):
        assert subject.try_parse_package("package de.skuzzle") == "de.skuzzle"

    def test_import_optional_semicolon(self, subject):
        assert subject.try_parse_import("import groovy.json.JsonSlurper", 2) == [
            ImportStatement("groovy.json.JsonSlurper", 2)
        ]
        assert subject.try_parse_import("import groovy.json.JsonSlurper;", 2) == [
            ImportStatement("groovy.json.JsonSlurper", 2)
        ]

    def test_static_import(self, subject):
        assert subject.try_parse_import("import static java.lang.Math.max", 3) == [
            ImportStatement("static java.lang.Math.max", 3)
        ]

    def test_code_line(self, subject):
        assert subject.try_parse_import("def x = 1", 5) == []
