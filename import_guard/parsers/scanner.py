"""Extract the package declaration and leading imports of a source file."""

from pathlib import Path
from typing import Iterable, Iterator

from ..analyzer.models import ImportStatement, ParsedFile
from ..errors import ConfigurationError, ScanIOError
from ..utils.logging import get_logger
from .base import LineClassifier

logger = get_logger("scanner")


def _strip_comments(line: str, in_block: bool) -> tuple[str, bool]:
    """Remove ``//`` and ``/* */`` comments, tracking open block comments."""
    kept: list[str] = []
    pos = 0
    while pos < len(line):
        if in_block:
            end = line.find("*/", pos)
            if end == -1:
                return "".join(kept), True
            pos = end + 2
            in_block = False
            continue

        block = line.find("/*", pos)
        single = line.find("//", pos)
        if single != -1 and (block == -1 or single < block):
            kept.append(line[pos:single])
            return "".join(kept), False
        if block == -1:
            kept.append(line[pos:])
            break
        kept.append(line[pos:block])
        pos = block + 2
        in_block = True
    return "".join(kept), in_block


def code_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line trimmed and with comments removed (one per input line)."""
    in_block = False
    for line in lines:
        code, in_block = _strip_comments(line, in_block)
        yield code.strip()


def guess_fqcn(package_name: str, path: Path) -> str:
    name = path.name
    index = name.rfind(".")
    simple_name = name[:index] if index != -1 else name
    return f"{package_name}.{simple_name}" if package_name else simple_name


class LineScanner:
    """Reads the preamble of source files with a pluggable line classifier.

    Scanning stops at the first non-empty line that is neither the package
    statement nor an import, as imports are expected at the top of a file.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def parse(self, path: Path, classifier: LineClassifier) -> ParsedFile:
        """Parse a file from disk.

        Raises:
            ScanIOError: If the file cannot be read or decoded.
            ConfigurationError: If the file declares more than one package.
        """
        logger.debug(f"Analyzing {path} for imports")
        try:
            with path.open("r", encoding=self.encoding) as handle:
                return self.parse_lines(path, handle, classifier)
        except (OSError, UnicodeDecodeError) as e:
            raise ScanIOError(
                path, f"Encountered I/O error while analyzing {path} for banned imports: {e}"
            ) from e

    def parse_lines(
        self,
        path: Path,
        lines: Iterable[str],
        classifier: LineClassifier,
    ) -> ParsedFile:
        """Parse already available lines; ``path`` names the file."""
        package_name = ""
        imports: list[ImportStatement] = []

        for row, line in enumerate(code_lines(lines), start=1):
            if not line:
                continue

            package = classifier.try_parse_package(line)
            if package is not None:
                if package_name:
                    raise ConfigurationError(f"found duplicate package statement in '{path}'")
                package_name = package
                continue

            found = classifier.try_parse_import(line, row)
            if not found:
                break
            imports.extend(found)

        fqcn = guess_fqcn(package_name, path)
        logger.debug(f"Guessed fully qualified name '{fqcn}' for {path}")
        return ParsedFile(
            path=path,
            package_name=package_name,
            fqcn=fqcn,
            imports=tuple(imports),
        )
