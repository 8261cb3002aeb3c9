"""Key/pattern sets that can be matched against each other with regular expressions."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class Matchable:
    """A set of named regular expression patterns."""

    def __init__(self, patterns: Mapping[str, str] | None = None) -> None:
        self._patterns: dict[str, str] = {}
        if patterns:
            self.add_matching_patterns(patterns)

    @property
    def matching_patterns(self) -> dict[str, str]:
        """A copy of the patterns, ordered by key."""
        return dict(sorted(self._patterns.items()))

    @property
    def matching_pattern_count(self) -> int:
        return len(self._patterns)

    def add_matching_pattern(self, key: str, value: str) -> None:
        self._patterns[key] = value

    def add_matching_patterns(self, patterns: Mapping[str, str]) -> None:
        for key, value in patterns.items():
            self.add_matching_pattern(key, value)

    def get_matching_pattern(self, key: str) -> str | None:
        return self._patterns.get(key)

    def set_matching_patterns(self, other: Matchable) -> None:
        """Replace all patterns with a copy of another matchable's patterns."""
        self._patterns = dict(other._patterns)

    def remove_matching_pattern(self, key: str) -> None:
        self._patterns.pop(key, None)

    def has_matching_patterns(self) -> bool:
        return bool(self._patterns)

    def matches_all(self, other: Matchable) -> bool:
        """True if both have the same, non-zero number of patterns and all of mine match."""
        match_count = 0
        if self._both_have_patterns(other) and self._same_pattern_count(other):
            match_count = self._count_matches(other)
        else:
            logger.info("Patterns do not match because of different counts")
        logger.info("Patterns matched %d/%d", match_count, self.matching_pattern_count)
        return match_count == self.matching_pattern_count and match_count > 0

    def matches_all_of_mine_to_any_of_the_other(self, other: Matchable) -> bool:
        """True if I have no patterns or every one of mine matches a value of the other."""
        return (
            not self._patterns
            or self.matching_pattern_count == self._count_matches(other)
        )

    def _both_have_patterns(self, other: Matchable) -> bool:
        return self.has_matching_patterns() and other.has_matching_patterns()

    def _same_pattern_count(self, other: Matchable) -> bool:
        return self.matching_pattern_count == other.matching_pattern_count

    def _count_matches(self, other: Matchable) -> int:
        return sum(
            1
            for key, pattern in self._patterns.items()
            if (value := other.get_matching_pattern(key)) is not None
            and _regex_match(pattern, value)
        )


def _regex_match(pattern: str, value: str) -> bool:
    try:
        return re.fullmatch(pattern, value) is not None
    except re.error as exc:
        logger.error(
            "Failed to match regular expression '%s' with value '%s' - %s",
            pattern,
            value,
            exc,
        )
        return False