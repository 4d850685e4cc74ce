"""Tests for formatting/scanner.py: live placeholder counting.

The escape rule (one backslash escapes, two or more do not) is a
compatibility contract with the SLF4J formatter; the literal cases below
pin it.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from textcrate.formatting.scanner import (
    PlaceholderMatch,
    count_live_placeholders,
    iter_placeholders,
)
from tests.strategies import BuiltPattern, arbitrary_patterns, built_patterns


class TestCountLivePlaceholders:
    """Literal cases for count_live_placeholders."""

    def test_single_live_placeholder(self) -> None:
        """A bare marker is live."""
        assert count_live_placeholders("a {} b") == 1

    def test_single_backslash_escapes(self) -> None:
        """One backslash suppresses the marker."""
        assert count_live_placeholders("a \\{} b") == 0

    def test_double_backslash_does_not_escape(self) -> None:
        """Two backslashes leave the marker live."""
        assert count_live_placeholders("a \\\\{} b") == 1

    def test_triple_backslash_does_not_escape(self) -> None:
        """Three backslashes leave the marker live."""
        assert count_live_placeholders("a \\\\\\{} b") == 1

    def test_empty_pattern(self) -> None:
        """Empty pattern has no placeholders."""
        assert count_live_placeholders("") == 0

    def test_no_markers(self) -> None:
        """Plain text has no placeholders."""
        assert count_live_placeholders("Nothing to see here") == 0

    def test_consecutive_markers(self) -> None:
        """Adjacent markers are independent matches."""
        assert count_live_placeholders("{}{}") == 2

    def test_escape_does_not_leak_to_next_marker(self) -> None:
        """An escaped marker followed by a live one counts once."""
        assert count_live_placeholders("\\{}{}") == 1

    def test_backslash_not_before_marker_is_text(self) -> None:
        """Backslashes elsewhere are plain text."""
        assert count_live_placeholders("C:\\temp\\{} and {}") == 1
        assert count_live_placeholders("path\\to {}") == 1

    @pytest.mark.parametrize(
        "pattern",
        ["{ }", "{", "}", "}{", "{{", "\\{ }"],
    )
    def test_incomplete_markers(self, pattern: str) -> None:
        """Anything but the exact two-character marker is text."""
        assert count_live_placeholders(pattern) == 0

    def test_nested_braces(self) -> None:
        """The inner pair of '{{}}' is a marker."""
        assert count_live_placeholders("{{}}") == 1

    def test_many_markers(self) -> None:
        """Counts accumulate across the pattern."""
        assert count_live_placeholders("{} \\{} {} \\\\{} {}") == 4


class TestIterPlaceholders:
    """Match positions and escape classification."""

    def test_positions_and_classification(self) -> None:
        """Escaped and live matches are reported with their spans."""
        matches = list(iter_placeholders("a \\{} b {}"))

        assert matches == [
            PlaceholderMatch(start=2, end=5, backslashes=1, live=False),
            PlaceholderMatch(start=8, end=10, backslashes=0, live=True),
        ]
        assert matches[0].marker_start == 3
        assert matches[1].marker_start == 8

    def test_backslash_run_belongs_to_one_match(self) -> None:
        """A run of backslashes is consumed whole by the following marker."""
        (match,) = iter_placeholders("x\\\\\\{}")

        assert match.start == 1
        assert match.backslashes == 3
        assert match.live

    def test_empty_pattern_yields_nothing(self) -> None:
        """No matches in an empty pattern."""
        assert list(iter_placeholders("")) == []


class TestScannerProperties:
    """Property-based tests for the scanner."""

    @given(built=built_patterns())
    def test_count_matches_construction(self, built: BuiltPattern) -> None:
        """Live count equals the number of live tokens generated."""
        assert count_live_placeholders(built.text) == built.live

    @given(built=built_patterns())
    def test_escaped_matches_are_reported(self, built: BuiltPattern) -> None:
        """Every escaped token shows up as a non-live match."""
        escaped = [m for m in iter_placeholders(built.text) if not m.live]
        assert len(escaped) == built.escaped

    @given(
        pattern=arbitrary_patterns,
        data=st.data(),
        padding=st.sampled_from([" ", "  ", "\t", "\n"]),
    )
    def test_whitespace_outside_markers_is_invariant(
        self, pattern: str, data: st.DataObject, padding: str
    ) -> None:
        """Adding whitespace outside marker runs never changes the count."""
        inside = {
            position
            for match in iter_placeholders(pattern)
            for position in range(match.start + 1, match.end)
        }
        allowed = [p for p in range(len(pattern) + 1) if p not in inside]
        positions = data.draw(st.lists(st.sampled_from(allowed), max_size=5, unique=True))
        event(f"insertions={len(positions)}")

        padded = pattern
        for position in sorted(positions, reverse=True):
            padded = padded[:position] + padding + padded[position:]

        assert count_live_placeholders(padded) == count_live_placeholders(pattern)

    @given(pattern=arbitrary_patterns)
    def test_count_equals_live_matches(self, pattern: str) -> None:
        """count_live_placeholders agrees with iter_placeholders."""
        live = sum(1 for m in iter_placeholders(pattern) if m.live)
        assert count_live_placeholders(pattern) == live

    @given(pattern=arbitrary_patterns)
    def test_matches_do_not_overlap(self, pattern: str) -> None:
        """Matches are ordered and disjoint."""
        matches = list(iter_placeholders(pattern))
        for left, right in zip(matches, matches[1:], strict=False):
            assert left.end <= right.start
