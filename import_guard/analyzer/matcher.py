"""Evaluate a parsed file against rule groups."""

from typing import Iterable

from ..utils.logging import get_logger
from .groups import RuleGroup
from .models import MatchedFile, MatchedImport, ParsedFile

logger = get_logger("matcher")


def match_file(parsed_file: ParsedFile, groups: Iterable[RuleGroup]) -> MatchedFile | None:
    """Collect the banned imports of a file.

    Returns None when the file is excluded by any group, no group applies to
    it, or none of its imports is banned. Each line yields at most one match;
    groups are consulted in declaration order and the first one that bans an
    import wins.
    """
    groups = list(groups)
    if any(group.excludes(parsed_file) for group in groups):
        logger.debug(f"Skipping excluded file {parsed_file.fqcn}")
        return None

    applicable = [group for group in groups if group.applies_to(parsed_file)]
    if not applicable:
        return None

    matched: list[MatchedImport] = []
    seen_lines: set[int] = set()
    for statement in parsed_file.imports:
        if statement.line_number in seen_lines:
            continue
        for group in applicable:
            pattern = group.banned_by(statement.name)
            if pattern is None:
                continue
            matched.append(
                MatchedImport(
                    line_number=statement.line_number,
                    import_name=statement.name,
                    matched_by=pattern,
                    reason=group.reason,
                )
            )
            seen_lines.add(statement.line_number)
            break

    if not matched:
        return None
    return MatchedFile(source_file=parsed_file, matched_imports=tuple(matched))
