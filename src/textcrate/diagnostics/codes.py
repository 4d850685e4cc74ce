"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for pattern and catalog errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (validation of a single pattern)
        2000-2999: Catalog errors (registration and lookup)
    """

    # Pattern errors (1000-1999)
    PATTERN_EMPTY = 1001
    PATTERN_TOO_GENERIC = 1002
    PARAMETER_COUNT_MISMATCH = 1003
    PATTERN_REJECTED = 1004

    # Catalog errors (2000-2999)
    DUPLICATE_MESSAGE_ID = 2001
    DUPLICATE_MESSAGE_NAME = 2002
    MESSAGE_NOT_FOUND = 2003
    CODE_PATTERN_INVALID = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (linters, CI checks).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_id: Catalog message id the error refers to (catalog errors)
        pattern: Offending pattern text (pattern errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_id: int | None = None
    pattern: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARAMETER_COUNT_MISMATCH]: parameter count 2 does not match pattern: 1
              --> message 1
              = pattern: "'{}' is currently not available"
              = help: Declare as many parameters as the pattern has live placeholders

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
