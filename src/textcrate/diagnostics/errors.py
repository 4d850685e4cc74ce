"""textcrate exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error
information. ``str(error)`` is always the plain reason text so callers
can match on it; use ``error.diagnostic.format_error()`` for the
Rust-style rendering.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "InvalidPatternError",
    "TextCrateError",
]


class TextCrateError(Exception):
    """Base exception for all textcrate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextCrateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def reason(self) -> str:
        """Human-readable reason, identical to ``str(error)``."""
        return str(self)


class InvalidPatternError(TextCrateError):
    """Pattern failed validation.

    Raised at catalog-load time, never while formatting. Reasons:
    - Empty or whitespace-only pattern
    - Pattern consisting of nothing but a placeholder
    - Declared parameter count differs from live placeholder count

    Attributes:
        pattern: The rejected pattern (None if the pattern was None)
        expected: Declared parameter count (mismatch only)
        found: Live placeholder count (mismatch only)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pattern: str | None = None,
        expected: int | None = None,
        found: int | None = None,
    ) -> None:
        """Initialize InvalidPatternError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The rejected pattern
            expected: Declared parameter count
            found: Live placeholder count
        """
        super().__init__(message)
        self.pattern = pattern
        self.expected = expected
        self.found = found


class CatalogError(TextCrateError):
    """Catalog registration or lookup failure.

    Examples:
    - Two messages share an id or a name
    - Lookup of a message the catalog does not define
    """
