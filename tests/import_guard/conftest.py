"""Shared fixtures for import_guard tests."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from import_guard.analyzer.models import ImportStatement, ParsedFile

# ============================================================================
# Path Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def java_project(temp_dir: Path) -> Path:
    """Create a small Maven-style project with source and test roots."""
    main = temp_dir / "src" / "main" / "java" / "de" / "skuzzle" / "app"
    test = temp_dir / "src" / "test" / "java" / "de" / "skuzzle" / "app"
    main.mkdir(parents=True)
    test.mkdir(parents=True)

    (main / "Service.java").write_text(SAMPLE_JAVA_SOURCE, encoding="utf-8")
    (main / "Clean.java").write_text(
        "package de.skuzzle.app;\n\nimport java.util.List;\n\npublic class Clean {}\n",
        encoding="utf-8",
    )
    (main / "notes.txt").write_text("import org.junit.Test;\n", encoding="utf-8")
    (test / "ServiceTest.java").write_text(
        "package de.skuzzle.app;\n\nimport org.junit.Test;\nimport java.util.List;\n\nclass ServiceTest {}\n",
        encoding="utf-8",
    )
    return temp_dir


# ============================================================================
# Sample Code Fixtures
# ============================================================================

SAMPLE_JAVA_SOURCE = """/*
 * Licensed under the MIT License.
 */
package de.skuzzle.app;

import java.util.List;
import java.util.Vector;
// import java.util.Hashtable;
import static org.junit.Assert.assertTrue;

import org.junit.Test;

public class Service {
    private final List<String> names = new Vector<>();
}
"""


@pytest.fixture
def sample_java_code() -> str:
    """Java source with a license header, imports and a class body."""
    return SAMPLE_JAVA_SOURCE


@pytest.fixture
def sample_kotlin_code() -> str:
    """Kotlin source without semicolons and with an aliased import."""
    return """package de.skuzzle.kt

import kotlin.collections.List
import java.util.Vector as JVector
import org.junit.*

class Sample
"""


def make_parsed_file(class_name: str, package_name: str, *imports: str) -> ParsedFile:
    """ParsedFile whose imports are numbered from 0 in the given order."""
    fqcn = f"{package_name}.{class_name}" if package_name else class_name
    return ParsedFile(
        path=Path(f"{class_name}.java"),
        package_name=package_name,
        fqcn=fqcn,
        imports=tuple(ImportStatement(name, line) for line, name in enumerate(imports)),
    )


@pytest.fixture
def parsed_file() -> ParsedFile:
    """File de.skuzzle.test.File with a mix of imports."""
    return make_parsed_file(
        "File",
        "de.skuzzle.test",
        "de.skuzzle.sample.Test",
        "foo.bar.xyz",
        "de.skuzzle.sample.Test2",
        "de.skuzzle.sample.Test3",
        "de.foo.bar.Test",
    )


@pytest.fixture
def make_file():
    """Factory building ParsedFile instances, see make_parsed_file."""
    return make_parsed_file
