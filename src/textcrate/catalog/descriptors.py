"""Immutable descriptions of catalogs and their messages.

These are the plain values any discovery mechanism (hand-written tables,
configuration files, code generation) hands to the engine. They carry no
behavior beyond constructor checks.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from textcrate.types import MessageId, MessageName, Pattern, Properties

__all__ = ["CatalogSpec", "MessageDescriptor", "freeze_properties"]

_EMPTY_PROPERTIES: Properties = MappingProxyType({})


def freeze_properties(properties: Properties | None) -> Properties:
    """Return a read-only copy of ``properties``."""
    if not properties:
        return _EMPTY_PROPERTIES
    return MappingProxyType(dict(properties))


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Description of one message in a catalog.

    Attributes:
        id: Positive message id, unique within the catalog
        pattern: Message pattern with ``{}`` placeholders
        parameter_count: Number of arguments the message takes
        properties: Message-level metadata (read-only)
        name: Optional symbolic name, unique within the catalog

    Example:
        >>> MessageDescriptor(
        ...     id=1,
        ...     pattern="'{}' is currently not available",
        ...     parameter_count=1,
        ...     properties={"severity": "warning"},
        ...     name="book_not_available",
        ... )
    """

    id: MessageId
    pattern: Pattern
    parameter_count: int = 0
    properties: Properties = field(default_factory=dict, hash=False)
    name: MessageName | None = None

    def __post_init__(self) -> None:
        """Validate field values and freeze properties.

        Raises:
            ValueError: If id is not positive or parameter_count is negative.
        """
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            msg = f"message id must be a positive integer, got {self.id!r}"
            raise ValueError(msg)
        if isinstance(self.parameter_count, bool) or not isinstance(self.parameter_count, int):
            msg = f"parameter_count must be an integer, got {self.parameter_count!r}"
            raise ValueError(msg)
        if self.parameter_count < 0:
            msg = f"parameter_count must be >= 0, got {self.parameter_count}"
            raise ValueError(msg)
        object.__setattr__(self, "properties", freeze_properties(self.properties))


@dataclass(frozen=True, slots=True)
class CatalogSpec:
    """Description shared by all messages of one catalog.

    Attributes:
        offset: Added to each message id to form the code value
        code_pattern: Pattern with exactly one live placeholder for the code
        properties: Catalog-level metadata; message properties override it
        name: Optional catalog name used in logs

    Example:
        >>> CatalogSpec(offset=20, code_pattern="BOR-{}", properties={"type": "error"})
    """

    offset: int
    code_pattern: Pattern
    properties: Properties = field(default_factory=dict, hash=False)
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate offset type and freeze properties.

        Raises:
            ValueError: If offset is not an integer.
        """
        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            msg = f"offset must be an integer, got {self.offset!r}"
            raise ValueError(msg)
        object.__setattr__(self, "properties", freeze_properties(self.properties))
