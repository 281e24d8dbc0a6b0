"""Exception hierarchy for Import Guard."""

from pathlib import Path


class ImportGuardError(Exception):
    """Base class for all errors raised by Import Guard."""


class PatternSyntaxError(ImportGuardError, ValueError):
    """Raised when a package pattern string is malformed."""

    def __init__(self, pattern: str, message: str):
        super().__init__(message)
        self.pattern = pattern


class ConfigurationError(ImportGuardError, ValueError):
    """Raised for structurally invalid rule groups or settings."""


class ScanIOError(ImportGuardError):
    """Raised when a file that exists cannot be listed or read."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path
