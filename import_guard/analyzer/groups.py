"""Rule groups: which packages are checked and which imports are banned."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from ..errors import ConfigurationError
from .models import ParsedFile
from .pattern import Pattern, most_specific, parse_all


@dataclass(frozen=True)
class RuleGroup:
    """A named set of base, banned, allowed and excluded patterns.

    Construction validates the group:

    - at least one base pattern and one banned pattern are required
    - every allowed pattern must be matched by a banned pattern
    - every exclusion (or its package part) must be matched by a base pattern
    """

    base_patterns: tuple[Pattern, ...]
    banned_patterns: tuple[Pattern, ...]
    allowed_patterns: tuple[Pattern, ...] = ()
    excluded_classes: tuple[Pattern, ...] = ()
    reason: str | None = None

    def __post_init__(self) -> None:
        if not self.base_patterns:
            raise ConfigurationError("Rule group has no base packages")
        if not self.banned_patterns:
            raise ConfigurationError("Rule group has no banned imports")

        for allowed in self.allowed_patterns:
            if not any(banned.matches(allowed) for banned in self.banned_patterns):
                raise ConfigurationError(
                    f"The allowed import pattern '{allowed}' does not match any banned package"
                )
        for exclusion in self.excluded_classes:
            if not any(_covers(base, exclusion) for base in self.base_patterns):
                raise ConfigurationError(
                    f"The exclusion pattern '{exclusion}' does not match any base package"
                )

    @classmethod
    def create(
        cls,
        *,
        base_packages: Iterable[str],
        banned_imports: Iterable[str],
        allowed_imports: Iterable[str] = (),
        exclusions: Iterable[str] = (),
        reason: str | None = None,
    ) -> "RuleGroup":
        """Build a group from pattern strings.

        Raises:
            PatternSyntaxError: If any of the strings is not a valid pattern.
            ConfigurationError: If the group violates its invariants.
        """
        return cls(
            base_patterns=parse_all(base_packages),
            banned_patterns=parse_all(banned_imports),
            allowed_patterns=parse_all(allowed_imports),
            excluded_classes=parse_all(exclusions),
            reason=reason or None,
        )

    def excludes(self, parsed_file: ParsedFile) -> bool:
        return any(pattern.matches(parsed_file.fqcn) for pattern in self.excluded_classes)

    def applies_to(self, parsed_file: ParsedFile) -> bool:
        return any(
            pattern.matches(parsed_file.package_name) or pattern.matches(parsed_file.fqcn)
            for pattern in self.base_patterns
        )

    def is_allowed(self, import_name: str) -> bool:
        return any(pattern.matches(import_name) for pattern in self.allowed_patterns)

    def banned_by(self, import_name: str) -> Pattern | None:
        """Most specific banned pattern matching the import, unless it is allowed."""
        if self.is_allowed(import_name):
            return None
        return most_specific(p for p in self.banned_patterns if p.matches(import_name))

    def __str__(self) -> str:
        lines = [
            f"  base packages: {', '.join(map(str, self.base_patterns))}",
            f"  banned imports: {', '.join(map(str, self.banned_patterns))}",
        ]
        if self.allowed_patterns:
            lines.append(f"  allowed imports: {', '.join(map(str, self.allowed_patterns))}")
        if self.excluded_classes:
            lines.append(f"  exclusions: {', '.join(map(str, self.excluded_classes))}")
        if self.reason:
            lines.append(f"  reason: {self.reason}")
        return "\n".join(lines)


def _covers(base: Pattern, exclusion: Pattern) -> bool:
    """Whether files named by ``exclusion`` can be in scope of ``base``.

    Scope is decided on the package or the FQCN of a file, so the exclusion
    is also covered when its package part matches.
    """
    if base.matches(exclusion):
        return True
    if len(exclusion.segments) < 2:
        return False
    package = Pattern(segments=exclusion.segments[:-1], static=exclusion.static)
    return base.matches(package)


class RuleGroups(Sequence[RuleGroup]):
    """Ordered, non-empty collection of rule groups."""

    def __init__(self, groups: Iterable[RuleGroup]):
        self._groups = tuple(groups)
        if not self._groups:
            raise ConfigurationError("At least one rule group is required")

    def __getitem__(self, index):
        return self._groups[index]

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[RuleGroup]:
        return iter(self._groups)

    def excludes(self, parsed_file: ParsedFile) -> bool:
        return any(group.excludes(parsed_file) for group in self._groups)

    def applicable_to(self, parsed_file: ParsedFile) -> list[RuleGroup]:
        return [group for group in self._groups if group.applies_to(parsed_file)]

    def __str__(self) -> str:
        return "\n".join(f"Group {i}:\n{group}" for i, group in enumerate(self._groups, 1))
