"""Validation result for catalog checks.

Collects every diagnostic found while checking a catalog so tooling can
report all problems at once instead of stopping at the first.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable validation result.

    Attributes:
        errors: Diagnostics found, in discovery order

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors found."""
        return len(self.errors)

    def codes(self) -> tuple[DiagnosticCode, ...]:
        """Diagnostic codes of all errors, in discovery order."""
        return tuple(error.code for error in self.errors)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[Diagnostic, ...]) -> "ValidationResult":
        """Create a result carrying the given errors."""
        return ValidationResult(errors=errors)

    def format(self) -> str:
        """Format validation result as human-readable string."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format_validation_result(self)
