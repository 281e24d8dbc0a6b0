"""Kotlin package and import statements."""

import re

from ..analyzer.models import ImportStatement
from .base import LineClassifier, register_classifier

_PACKAGE = re.compile(r"^package\s+([\w.`]+)\s*;?$")
_IMPORT = re.compile(r"^import\s+([\w.`*]+)(?:\s+as\s+\w+)?$")


@register_classifier
class KotlinLineClassifier(LineClassifier):
    name = "kotlin"
    file_extensions = (".kt", ".kts")

    def try_parse_package(self, line: str) -> str | None:
        match = _PACKAGE.match(line)
        if match is None:
            return None
        return match.group(1).replace("`", "")

    def try_parse_import(self, line: str, line_number: int) -> list[ImportStatement]:
        imports: list[ImportStatement] = []
        for statement in line.split(";"):
            statement = statement.strip()
            if not statement:
                continue
            match = _IMPORT.match(statement)
            if match is None:
                break
            imports.append(ImportStatement(match.group(1).replace("`", ""), line_number))
        return imports
