"""Groovy package and import statements (semicolons optional)."""

import re

from ..analyzer.models import ImportStatement
from .base import LineClassifier, register_classifier

_PACKAGE = re.compile(r"^package\s+([\w.$]+)\s*;?$")
_IMPORT = re.compile(r"^import\s+(static\s+)?([\w.$*]+)(?:\s+as\s+\w+)?$")


@register_classifier
class GroovyLineClassifier(LineClassifier):
    name = "groovy"
    file_extensions = (".groovy",)

    def try_parse_package(self, line: str) -> str | None:
        match = _PACKAGE.match(line)
        return match.group(1) if match else None

    def try_parse_import(self, line: str, line_number: int) -> list[ImportStatement]:
        imports: list[ImportStatement] = []
        for statement in line.split(";"):
            statement = statement.strip()
            if not statement:
                continue
            match = _IMPORT.match(statement)
            if match is None:
                break
            prefix = "static " if match.group(1) else ""
            imports.append(ImportStatement(prefix + match.group(2), line_number))
        return imports
