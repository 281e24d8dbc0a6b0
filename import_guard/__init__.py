"""Import Guard - Detect banned imports in source trees."""

__version__ = "0.1.0"

from .analyzer import (
    AnalyzeResult,
    AnalyzerSettings,
    Pattern,
    RuleGroup,
    RuleGroups,
    SourceTreeAnalyzer,
    analyze,
    match_file,
)
from .config import AppConfig, get_config, load_config
from .errors import ConfigurationError, ImportGuardError, PatternSyntaxError, ScanIOError
from .parsers import LineClassifier, LineScanner, register_classifier

__all__ = [
    "AnalyzeResult",
    "AnalyzerSettings",
    "AppConfig",
    "ConfigurationError",
    "ImportGuardError",
    "LineClassifier",
    "LineScanner",
    "Pattern",
    "PatternSyntaxError",
    "RuleGroup",
    "RuleGroups",
    "ScanIOError",
    "SourceTreeAnalyzer",
    "analyze",
    "get_config",
    "load_config",
    "match_file",
    "register_classifier",
    "__version__",
]
