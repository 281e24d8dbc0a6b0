"""Java package and import statements."""

from ..analyzer.models import ImportStatement
from .base import LineClassifier, register_classifier


@register_classifier
class JavaLineClassifier(LineClassifier):
    name = "java"
    file_extensions = (".java",)

    def try_parse_package(self, line: str) -> str | None:
        if not line.startswith("package ") or not line.endswith(";"):
            return None
        return line[len("package "):-1].strip()

    def try_parse_import(self, line: str, line_number: int) -> list[ImportStatement]:
        # import a.b.C; import static a.b.C.d;
        if not line.endswith(";"):
            return []

        imports: list[ImportStatement] = []
        for statement in line[:-1].split(";"):
            statement = statement.strip()
            if not statement.startswith("import "):
                break
            name = statement[len("import "):].strip()
            if name.startswith("static "):
                name = "static " + name[len("static "):].strip()
            imports.append(ImportStatement(name, line_number))
        return imports
