"""Line classifier interface and the extension registry."""

from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ..analyzer.models import ImportStatement
from ..errors import ConfigurationError


class LineClassifier(ABC):
    """Recognizes package and import statements of one source language.

    Both operations receive a single trimmed line with comments removed.
    """

    name: str = ""
    file_extensions: tuple[str, ...] = ()

    @abstractmethod
    def try_parse_package(self, line: str) -> str | None:
        """Return the declared package if the line is a package statement."""
        ...

    @abstractmethod
    def try_parse_import(self, line: str, line_number: int) -> list[ImportStatement]:
        """Return the imports declared on the line, empty if it is not an import."""
        ...


# Classifier registry
_classifiers: dict[str, LineClassifier] = {}


def normalize_extension(extension: str) -> str:
    extension = extension.lower()
    return extension if extension.startswith(".") else "." + extension


def register_classifier(cls: type[LineClassifier]) -> type[LineClassifier]:
    """Class decorator registering a classifier for its file extensions."""
    instance = cls()
    for extension in instance.file_extensions:
        normalized = normalize_extension(extension)
        if normalized in _classifiers:
            raise ConfigurationError(
                f"There are multiple parsers to handle file extension: {normalized}"
            )
        _classifiers[normalized] = instance
    return cls


def get_registry() -> Mapping[str, LineClassifier]:
    """Read-only view of extension -> classifier."""
    return MappingProxyType(_classifiers)


def file_extension(path: Path) -> str | None:
    name = path.name.lower()
    index = name.rfind(".")
    if index == -1:
        return None
    return name[index:]


def get_classifier_for_file(
    path: Path, registry: Mapping[str, LineClassifier] | None = None
) -> LineClassifier | None:
    """Get the classifier for a file based on its (case-insensitive) extension."""
    extension = file_extension(path)
    if extension is None:
        return None
    return (registry if registry is not None else _classifiers).get(extension)
