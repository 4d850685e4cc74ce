"""Pattern validation against a declared parameter count.

Rules are checked in order and the first failure wins:

1. None, empty or whitespace-only pattern
2. Pattern that is nothing but ``{}`` (after stripping whitespace)
3. Live placeholder count different from the declared parameter count

Used once per message at catalog-load time so a malformed catalog is
rejected before any call site can observe a broken message.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from textcrate.constants import PLACEHOLDER
from textcrate.diagnostics import ErrorTemplate, InvalidPatternError

from .scanner import count_live_placeholders

__all__ = ["PatternValidator", "validate_pattern"]


def validate_pattern(pattern: str | None, parameter_count: int) -> None:
    """Check a pattern for well-formedness and parameter-count agreement.

    Args:
        pattern: Pattern to check
        parameter_count: Number of parameters the message declares

    Raises:
        InvalidPatternError: If any rule fails. ``str(error)`` is the reason.

    Example:
        >>> validate_pattern("'{}' is currently not available", 1)
        >>> validate_pattern("'{}' is currently not available", 2)
        Traceback (most recent call last):
        ...
        textcrate.diagnostics.errors.InvalidPatternError: parameter count 2 does not match pattern: 1
    """
    if pattern is None or not pattern.strip():
        raise InvalidPatternError(ErrorTemplate.pattern_empty(pattern), pattern=pattern)

    if pattern.strip() == PLACEHOLDER:
        raise InvalidPatternError(ErrorTemplate.pattern_too_generic(pattern), pattern=pattern)

    placeholder_count = count_live_placeholders(pattern)
    if parameter_count != placeholder_count:
        diagnostic = ErrorTemplate.parameter_count_mismatch(
            pattern, parameter_count, placeholder_count
        )
        raise InvalidPatternError(
            diagnostic,
            pattern=pattern,
            expected=parameter_count,
            found=placeholder_count,
        )


@dataclass(frozen=True, slots=True)
class PatternValidator:
    """Validator capability for the ``{}`` pattern syntax.

    Stateless; one shared instance is enough for any number of catalogs.
    """

    def validate(self, pattern: str | None, parameter_count: int) -> None:
        """Validate ``pattern``; see validate_pattern()."""
        validate_pattern(pattern, parameter_count)
