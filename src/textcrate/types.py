"""Type aliases for the textcrate domain.

Provides semantic type aliases used throughout the catalog and formatting
packages and by user code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "MessageCode",
    "MessageId",
    "MessageKey",
    "MessageName",
    "Pattern",
    "Properties",
]

type Pattern = str
"""Text with positional ``{}`` placeholders (e.g., "'{}' is not available")."""

type MessageId = int
"""Positive numeric message identifier, unique within a catalog."""

type MessageName = str
"""Optional symbolic message name (e.g., 'book_not_available')."""

type MessageKey = MessageId | MessageName
"""Either form accepted when looking a message up in a catalog."""

type MessageCode = str
"""Public message code derived from offset + id (e.g., 'BOR-21')."""

type Properties = Mapping[str, str]
"""Arbitrary key/value metadata attached to a message or catalog."""
