"""Exclusion patterns for directory entry names."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence


class GlobPattern:
    """Restricted glob matched against a single entry name.

    ``*`` matches any run of characters (including none), ``?`` matches
    exactly one character, everything else matches itself. The whole name
    must match; there is no path-separator handling.
    """

    def __init__(self, pattern: str) -> None:
        """Initialize the glob pattern."""
        self.pattern: str = pattern
        self._compiled: re.Pattern[str] | None = None

    def compile(self) -> None:
        """Compile the glob pattern to an anchored regular expression."""
        parts: list[str] = []
        for char in self.pattern:
            if char == "*":
                parts.append(".*")
            elif char == "?":
                parts.append(".")
            else:
                parts.append(re.escape(char))
        self._compiled = re.compile("".join(parts), re.DOTALL)

    def matches(self, name: str) -> bool:
        """Check if the glob pattern matches the entry name.

        Args:
            name: File or directory name to check

        Returns:
            True if the pattern matches, False otherwise
        """
        if self._compiled is None:
            self.compile()

        assert self._compiled is not None  # Should never be None after compile()
        return self._compiled.fullmatch(name) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"


class ExclusionFilter:
    """Ordered collection of glob patterns; a name matching any is excluded."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        """Initialize the exclusion filter.

        Args:
            patterns: Initial glob patterns
        """
        self._patterns: list[GlobPattern] = []
        self.add_patterns(patterns)

    def add_pattern(self, pattern: str) -> None:
        self._patterns.append(GlobPattern(pattern))

    def add_patterns(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            self.add_pattern(pattern)

    def should_exclude(self, name: str) -> bool:
        """Check if an entry name should be excluded.

        Args:
            name: File or directory name to check

        Returns:
            True if any pattern matches, False otherwise (always False when empty)
        """
        return any(pattern.matches(name) for pattern in self._patterns)

    def filter_names(self, names: Iterable[str]) -> list[str]:
        """Return the names no pattern matches, order preserved."""
        return [name for name in names if not self.should_exclude(name)]

    def get_pattern_count(self) -> int:
        return len(self._patterns)


def matches(filename: str, patterns: Sequence[str]) -> bool:
    """Return True if ``filename`` matches any of ``patterns``.

    Args:
        filename: Single path segment to test
        patterns: Glob patterns; an empty sequence never matches

    Returns:
        True if at least one pattern matches the whole name
    """
    if not patterns:
        return False
    return ExclusionFilter(patterns).should_exclude(filename)
