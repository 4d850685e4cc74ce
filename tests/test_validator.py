"""Tests for formatting/validator.py: pattern validation rules.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textcrate.diagnostics import DiagnosticCode, InvalidPatternError
from textcrate.formatting import PatternValidator, Slf4jFormatter, Validator, validate_pattern
from tests.strategies import BuiltPattern, built_patterns


class TestEmptyPattern:
    """Rule 1: empty patterns are rejected."""

    @pytest.mark.parametrize("pattern", ["", " ", "\t\n", None])
    def test_empty_rejected(self, pattern: str | None) -> None:
        """None, empty and whitespace-only patterns fail."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_pattern(pattern, 0)

        assert str(exc_info.value) == "pattern cannot be empty"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_EMPTY

    def test_empty_checked_before_count(self) -> None:
        """Emptiness wins over a parameter-count mismatch."""
        with pytest.raises(InvalidPatternError, match="pattern cannot be empty"):
            validate_pattern("", 3)


class TestTooGenericPattern:
    """Rule 2: a bare placeholder is rejected."""

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_bare_placeholder_rejected(self, count: int) -> None:
        """'{}' fails regardless of the declared count."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_pattern("{}", count)

        assert str(exc_info.value) == "pattern too generic"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_TOO_GENERIC

    def test_padded_placeholder_rejected(self) -> None:
        """Surrounding whitespace does not rescue a bare placeholder."""
        with pytest.raises(InvalidPatternError, match="pattern too generic"):
            validate_pattern("  {}\n", 1)

    def test_escaped_placeholder_alone_is_not_generic(self) -> None:
        """An escaped marker is literal text, not a bare placeholder."""
        validate_pattern("\\{}", 0)

    def test_two_placeholders_not_generic(self) -> None:
        """Only the single bare marker is too generic."""
        validate_pattern("{}{}", 2)


class TestParameterCount:
    """Rule 3: live placeholder count must equal the declared count."""

    def test_matching_count_passes(self) -> None:
        """One placeholder, one parameter."""
        validate_pattern("'{}' is currently not available", 1)

    def test_mismatch_reports_both_counts(self) -> None:
        """Declared 2, found 1."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_pattern("'{}' is currently not available", 2)

        error = exc_info.value
        assert str(error) == "parameter count 2 does not match pattern: 1"
        assert error.expected == 2
        assert error.found == 1
        assert error.pattern == "'{}' is currently not available"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.PARAMETER_COUNT_MISMATCH

    def test_escaped_marker_not_counted(self) -> None:
        """Escaped markers do not need a parameter."""
        validate_pattern("Use \\{} for a placeholder, e.g. {}", 1)
        with pytest.raises(InvalidPatternError, match="parameter count 2 does not match pattern: 1"):
            validate_pattern("Use \\{} for a placeholder, e.g. {}", 2)

    def test_no_placeholders_with_parameters(self) -> None:
        """A pattern without markers cannot take parameters."""
        with pytest.raises(InvalidPatternError, match="parameter count 1 does not match pattern: 0"):
            validate_pattern("Service unavailable", 1)

    def test_reason_property(self) -> None:
        """reason mirrors str(error)."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_pattern("x {} {}", 1)
        assert exc_info.value.reason == str(exc_info.value)


class TestValidatorCapability:
    """Class forms satisfy the Validator protocol."""

    def test_pattern_validator_is_validator(self) -> None:
        """PatternValidator implements Validator."""
        assert isinstance(PatternValidator(), Validator)

    def test_slf4j_formatter_is_validator(self) -> None:
        """The default backend also validates."""
        formatter = Slf4jFormatter()
        assert isinstance(formatter, Validator)
        assert isinstance(formatter.validator, PatternValidator)

    def test_class_form_delegates(self) -> None:
        """PatternValidator.validate applies the same rules."""
        with pytest.raises(InvalidPatternError, match="pattern too generic"):
            PatternValidator().validate("{}", 1)
        with pytest.raises(InvalidPatternError, match="pattern cannot be empty"):
            Slf4jFormatter().validate("", 0)


class TestValidatorProperties:
    """Property-based tests for validate_pattern."""

    @given(built=built_patterns())
    def test_constructed_patterns_validate(self, built: BuiltPattern) -> None:
        """A pattern validates against its own live count."""
        validate_pattern(built.text, built.live)

    @given(built=built_patterns(), delta=st.integers(min_value=1, max_value=5))
    def test_wrong_count_fails(self, built: BuiltPattern, delta: int) -> None:
        """Any other declared count fails with both counts reported."""
        with pytest.raises(InvalidPatternError) as exc_info:
            validate_pattern(built.text, built.live + delta)

        assert exc_info.value.expected == built.live + delta
        assert exc_info.value.found == built.live
