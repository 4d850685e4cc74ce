"""Public message code derivation.

Python 3.13+.
"""

from __future__ import annotations

from textcrate.formatting import DEFAULT_FORMATTER, Formatter
from textcrate.types import MessageCode, MessageId, Pattern

__all__ = ["code_value", "derive_code"]


def code_value(offset: int, message_id: MessageId) -> int:
    """Numeric value substituted into a catalog code pattern."""
    return offset + message_id


def derive_code(
    offset: int,
    code_pattern: Pattern,
    message_id: MessageId,
    formatter: Formatter | None = None,
) -> MessageCode:
    """Compute a message's public code.

    The code pattern is formatted with the single value ``offset + message_id``.

    Args:
        offset: Catalog offset
        code_pattern: Pattern with exactly one live placeholder
        message_id: Message id within the catalog
        formatter: Backend to format with (default: SLF4J-style formatter)

    Returns:
        The code string; never raises

    Example:
        >>> derive_code(20, "BOR-{}", 1)
        'BOR-21'
        >>> derive_code(0, "E{}", 7)
        'E7'
    """
    backend = formatter if formatter is not None else DEFAULT_FORMATTER
    return backend.format(code_pattern, code_value(offset, message_id))
