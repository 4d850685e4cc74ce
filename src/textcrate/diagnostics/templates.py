"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def pattern_empty(pattern: str | None) -> Diagnostic:
        """Pattern is None, empty or whitespace only.

        Args:
            pattern: The rejected pattern

        Returns:
            Diagnostic for PATTERN_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY,
            message="pattern cannot be empty",
            hint="Give the message some literal text",
            pattern=pattern,
        )

    @staticmethod
    def pattern_too_generic(pattern: str) -> Diagnostic:
        """Pattern is nothing but a bare placeholder.

        Args:
            pattern: The rejected pattern

        Returns:
            Diagnostic for PATTERN_TOO_GENERIC
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_GENERIC,
            message="pattern too generic",
            hint="Surround the placeholder with text that says what the value means",
            pattern=pattern,
        )

    @staticmethod
    def parameter_count_mismatch(pattern: str, expected: int, found: int) -> Diagnostic:
        """Declared parameter count differs from the live placeholder count.

        Args:
            pattern: The rejected pattern
            expected: Declared parameter count
            found: Live placeholders found in the pattern

        Returns:
            Diagnostic for PARAMETER_COUNT_MISMATCH
        """
        msg = f"parameter count {expected} does not match pattern: {found}"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_COUNT_MISMATCH,
            message=msg,
            hint="Declare as many parameters as the pattern has live placeholders",
            pattern=pattern,
        )

    @staticmethod
    def pattern_rejected(pattern: str | None, reason: str) -> Diagnostic:
        """Pattern rejected by a backend validator without a diagnostic of its own.

        Args:
            pattern: The rejected pattern
            reason: Reason reported by the validator

        Returns:
            Diagnostic for PATTERN_REJECTED
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_REJECTED,
            message=reason,
            hint="Check the pattern against the rules of the selected formatter",
            pattern=pattern,
        )

    @staticmethod
    def code_pattern_invalid(code_pattern: str | None, reason: str) -> Diagnostic:
        """Catalog code pattern rejected by the validator.

        Args:
            code_pattern: The catalog code pattern
            reason: Reason reported by the validator

        Returns:
            Diagnostic for CODE_PATTERN_INVALID
        """
        msg = f"invalid code pattern: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CODE_PATTERN_INVALID,
            message=msg,
            hint="A code pattern needs exactly one live placeholder, e.g. 'ERR-{}'",
            pattern=code_pattern,
        )

    @staticmethod
    def duplicate_message_id(message_id: int) -> Diagnostic:
        """Two descriptors share an id.

        Args:
            message_id: The duplicated id

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        msg = f"duplicate message id: {message_id}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=msg,
            hint="Message ids must be unique within a catalog",
            message_id=message_id,
        )

    @staticmethod
    def duplicate_message_name(name: str, message_id: int) -> Diagnostic:
        """Two descriptors share a name.

        Args:
            name: The duplicated name
            message_id: Id of the second descriptor using the name

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_NAME
        """
        msg = f"duplicate message name: '{name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_NAME,
            message=msg,
            hint="Message names must be unique within a catalog",
            message_id=message_id,
        )

    @staticmethod
    def message_not_found(key: int | str) -> Diagnostic:
        """Lookup of a message the catalog does not define.

        Args:
            key: Message id or name that was looked up

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"message {key!r} not found"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the message is registered in the catalog",
        )
