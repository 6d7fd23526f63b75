"""Property-based tests for exclusion pattern invariants using Hypothesis.

These tests verify properties of the restricted glob grammar that must hold
for every entry name, catching escaping mistakes example-based tests miss.
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from barrelify.core.filesystem.exclusions import ExclusionFilter, GlobPattern, matches

# Entry names without glob metacharacters, including regex-special ones
literal_names = st.text(
    alphabet=st.characters(exclude_characters="*?/\x00", exclude_categories=("Cs",)),
    min_size=1,
    max_size=30,
)

any_names = st.text(
    alphabet=st.characters(exclude_characters="/\x00", exclude_categories=("Cs",)),
    min_size=1,
    max_size=30,
)


class TestGlobInvariants:
    """Property-based tests for GlobPattern."""

    @given(literal_names)
    def test_literal_pattern_matches_only_itself(self, name: str) -> None:
        """Property: a pattern without wildcards matches exactly its own text."""
        pattern = GlobPattern(name)

        assert pattern.matches(name)
        assert not pattern.matches(name + "x")
        assert not pattern.matches("x" + name)

    @given(any_names)
    def test_star_matches_everything(self, name: str) -> None:
        """Property: a lone star matches any name."""
        assert GlobPattern("*").matches(name)

    @given(any_names)
    def test_question_marks_match_exact_length(self, name: str) -> None:
        """Property: n question marks match exactly the names of length n."""
        pattern = GlobPattern("?" * len(name))

        assert pattern.matches(name)
        assert not pattern.matches(name + "a")

    @given(literal_names, any_names)
    def test_prefix_star(self, prefix: str, suffix: str) -> None:
        """Property: ``prefix*`` matches the prefix followed by anything."""
        assert GlobPattern(prefix + "*").matches(prefix + suffix)


class TestFilterInvariants:
    """Property-based tests for ExclusionFilter and matches."""

    @given(any_names)
    def test_empty_pattern_list_never_matches(self, name: str) -> None:
        """Property: no patterns means nothing is excluded."""
        assert not matches(name, [])

    @given(st.lists(any_names, max_size=20), st.lists(any_names, max_size=5))
    def test_filter_partitions_names(self, names: list[str], patterns: list[str]) -> None:
        """Property: kept names are an ordered subsequence and none of them match."""
        exclusion_filter = ExclusionFilter(patterns)
        kept = exclusion_filter.filter_names(names)

        assert kept == [name for name in names if not matches(name, patterns)]
        assert all(not exclusion_filter.should_exclude(name) for name in kept)

    @given(any_names, st.lists(any_names, max_size=5), st.lists(any_names, max_size=5))
    def test_matches_is_union(self, name: str, first: list[str], second: list[str]) -> None:
        """Property: matching a concatenated list is the OR of matching each part."""
        assert matches(name, first + second) == (matches(name, first) or matches(name, second))
