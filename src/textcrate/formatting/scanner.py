"""Placeholder scanning for ``{}`` patterns.

Counts the placeholders that will actually be substituted ("live") and
tells them apart from escaped ones.

Escape Rule:
    A run of backslashes directly before ``{}`` is inspected as a whole:

    - no backslash: live
    - exactly one backslash: escaped, not substituted
    - two or more backslashes: live (the doubled backslash stands for a
      literal backslash, not for an escape)

    This mirrors the SLF4J message formatter and is pinned by tests; it is
    a compatibility contract, not a general escaping scheme.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from textcrate.constants import ESCAPE_CHAR, PLACEHOLDER

__all__ = [
    "PlaceholderMatch",
    "count_live_placeholders",
    "iter_placeholders",
]

# Zero or more escape characters followed by the marker. finditer() resumes
# after each match, so a backslash run is never shared by two markers.
_PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(
    re.escape(ESCAPE_CHAR) + "*" + re.escape(PLACEHOLDER)
)


@dataclass(frozen=True, slots=True)
class PlaceholderMatch:
    """One ``\\*{}`` occurrence in a pattern.

    Attributes:
        start: Offset of the first backslash (or of ``{`` when there is none)
        end: Offset just past ``}``
        backslashes: Number of leading backslashes in the match
        live: Whether the marker will be substituted
    """

    start: int
    end: int
    backslashes: int
    live: bool

    @property
    def marker_start(self) -> int:
        """Offset of the ``{`` of the marker."""
        return self.start + self.backslashes


def _is_live(backslashes: int) -> bool:
    # only exactly one backslash counts as escaping
    return backslashes != 1


def iter_placeholders(pattern: str) -> Iterator[PlaceholderMatch]:
    """Yield every placeholder occurrence, live or escaped, left to right.

    Args:
        pattern: Pattern to scan

    Yields:
        PlaceholderMatch for each non-overlapping ``\\*{}`` run

    Example:
        >>> [m.live for m in iter_placeholders(r"a {} b \\{} c \\\\{}")]
        [True, False, True]
    """
    for match in _PLACEHOLDER_PATTERN.finditer(pattern):
        backslashes = len(match.group()) - len(PLACEHOLDER)
        yield PlaceholderMatch(
            start=match.start(),
            end=match.end(),
            backslashes=backslashes,
            live=_is_live(backslashes),
        )


def count_live_placeholders(pattern: str) -> int:
    """Count placeholders that will be substituted.

    Args:
        pattern: Pattern to scan

    Returns:
        Number of live ``{}`` markers (0 for an empty pattern)

    Example:
        >>> count_live_placeholders("a {} b")
        1
        >>> count_live_placeholders("a \\\\{} b")
        0
    """
    return sum(1 for match in iter_placeholders(pattern) if match.live)
