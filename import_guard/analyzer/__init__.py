"""Pattern matching and source tree analysis."""

from .pattern import Pattern, most_specific, parse_all, specificity_key
from .models import AnalyzeResult, ImportStatement, MatchedFile, MatchedImport, ParsedFile
from .groups import RuleGroup, RuleGroups
from .matcher import match_file
from .tree import AnalyzerSettings, SourceTreeAnalyzer, analyze

__all__ = [
    "AnalyzeResult",
    "AnalyzerSettings",
    "ImportStatement",
    "MatchedFile",
    "MatchedImport",
    "ParsedFile",
    "Pattern",
    "RuleGroup",
    "RuleGroups",
    "SourceTreeAnalyzer",
    "analyze",
    "match_file",
    "most_specific",
    "parse_all",
    "specificity_key",
]
