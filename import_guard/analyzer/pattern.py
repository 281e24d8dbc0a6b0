"""Package patterns: parsing, matching and specificity ordering.

A pattern is a dot separated sequence of segments. Each segment is either a
literal identifier, ``*`` (exactly one segment), ``**`` (zero or more
segments) or ``'*'`` (a segment that literally is ``*``). A leading
``static `` marks the pattern as matching static imports only.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Union

from ..errors import PatternSyntaxError

STATIC_PREFIX = "static "

ANY_SEGMENT = "*"
ANY_SEGMENTS = "**"
LITERAL_STAR = "'*'"

_WILDCARDS = (ANY_SEGMENT, ANY_SEGMENTS, LITERAL_STAR)


def _split_static(text: str) -> tuple[bool, str]:
    if text.startswith(STATIC_PREFIX):
        return True, text[len(STATIC_PREFIX):]
    return False, text


def _is_identifier_start(char: str) -> bool:
    return char == "$" or char.isidentifier()


def _is_identifier_part(char: str) -> bool:
    return char == "$" or ("a" + char).isidentifier()


def _check_segment(full: str, segment: str, index: int) -> None:
    if not segment:
        raise PatternSyntaxError(full, f"The pattern '{full}' contains an empty part")
    if segment in _WILDCARDS:
        return
    if "*" in segment:
        raise PatternSyntaxError(
            full,
            f"The pattern '{full}' contains a part which mixes wildcards and normal characters",
        )
    if index == 0 and segment == "static":
        return
    if not _is_identifier_start(segment[0]):
        raise PatternSyntaxError(
            full, f"The pattern '{full}' contains a non-identifier character '{segment[0]}'"
        )
    for char in segment[1:]:
        if not _is_identifier_part(char):
            raise PatternSyntaxError(
                full, f"The pattern '{full}' contains a non-identifier character '{char}'"
            )


def _segment_matches(pattern_segment: str, candidate_segment: str) -> bool:
    if pattern_segment in (ANY_SEGMENT, ANY_SEGMENTS):
        return True
    if pattern_segment == LITERAL_STAR:
        return candidate_segment == "*"
    return pattern_segment == candidate_segment


@dataclass(frozen=True)
class Pattern:
    """An immutable, validated package pattern."""

    segments: tuple[str, ...]
    static: bool = False

    @classmethod
    def parse(cls, text: str) -> "Pattern":
        """Parse and validate a pattern string.

        Raises:
            PatternSyntaxError: If the string is not a valid pattern.
        """
        static, body = _split_static(text)
        if body.startswith(".") or body.endswith("."):
            raise PatternSyntaxError(body, f"The pattern '{body}' contains an empty part")

        segments = tuple(body.split("."))
        for index, segment in enumerate(segments):
            _check_segment(body, segment, index)
        return cls(segments=segments, static=static)

    def matches(self, candidate: Union[str, "Pattern"]) -> bool:
        """Check whether a dotted name (or another pattern) is matched."""
        if isinstance(candidate, Pattern):
            if candidate is self:
                return True
            return self._matches_segments(candidate.static, candidate.segments)

        static, body = _split_static(candidate)
        return self._matches_segments(static, tuple(body.split(".")))

    def _matches_segments(self, static: bool, names: tuple[str, ...]) -> bool:
        if static != self.static:
            return False
        parts = self.segments
        if len(parts) > len(names):
            return False

        part_index = 0
        name_index = 0
        while part_index < len(parts) and name_index < len(names):
            part = parts[part_index]
            if part == ANY_SEGMENTS:
                if part_index + 1 < len(parts):
                    following = parts[part_index + 1]
                    while name_index < len(names) and not _segment_matches(
                        following, names[name_index]
                    ):
                        name_index += 1
                else:
                    name_index = len(names)
            elif _segment_matches(part, names[name_index]):
                name_index += 1
            else:
                return False
            part_index += 1

        return part_index == len(parts) and name_index == len(names)

    @property
    def last_segment(self) -> str:
        return self.segments[-1]

    def count(self, segment: str) -> int:
        return sum(1 for part in self.segments if part == segment)

    def compare_specificity(self, other: "Pattern") -> int:
        """Three-way comparison; positive when ``self`` is more specific."""
        for mine, theirs in ((self.count(ANY_SEGMENTS), other.count(ANY_SEGMENTS)),
                             (self.count(ANY_SEGMENT), other.count(ANY_SEGMENT))):
            if mine != theirs:
                return 1 if mine < theirs else -1

        mine, theirs = _last_segment_rank(self), _last_segment_rank(other)
        if mine != theirs:
            return 1 if mine > theirs else -1

        if len(self.segments) != len(other.segments):
            return 1 if len(self.segments) > len(other.segments) else -1
        return 0

    def is_more_specific_than(self, other: "Pattern") -> bool:
        return self.compare_specificity(other) > 0

    def __str__(self) -> str:
        body = ".".join(self.segments)
        return STATIC_PREFIX + body if self.static else body


def _last_segment_rank(pattern: Pattern) -> int:
    last = pattern.last_segment
    if last == ANY_SEGMENTS:
        return 0
    if last == ANY_SEGMENT:
        return 1
    return 2


specificity_key = cmp_to_key(Pattern.compare_specificity)


def parse_all(texts: Iterable[str]) -> tuple[Pattern, ...]:
    """Parse several pattern strings, failing on the first invalid one."""
    return tuple(Pattern.parse(text) for text in texts)


def most_specific(patterns: Iterable[Pattern]) -> Pattern | None:
    """Return the most specific pattern, the first one on ties."""
    winner: Pattern | None = None
    for pattern in patterns:
        if winner is None or pattern.is_more_specific_than(winner):
            winner = pattern
    return winner
