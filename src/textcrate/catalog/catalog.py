"""Explicit registration catalog.

Catalog consumes a CatalogSpec plus MessageDescriptors produced by any
discovery mechanism, validates everything once at construction, and then
produces MessageInstance values on demand.

Lifecycle:
    Descriptors are checked when the catalog is built. The first problem
    aborts construction, so a catalog that exists is fully valid and no
    call site ever observes a malformed message. ``validate_catalog()``
    runs the same checks without raising and reports every problem.

Thread Safety:
    A Catalog is read-only after construction. Safe for concurrent use.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from textcrate.constants import CODE_PATTERN_PARAMETER_COUNT
from textcrate.diagnostics import (
    CatalogError,
    ErrorTemplate,
    InvalidPatternError,
    TextCrateError,
    ValidationResult,
)
from textcrate.formatting import Formatter, Validator, resolve_formatter
from textcrate.types import MessageCode, MessageId, MessageKey, MessageName, Properties

from .codes import derive_code
from .descriptors import CatalogSpec, MessageDescriptor
from .instance import MessageInstance

__all__ = ["Catalog", "validate_catalog"]

logger = logging.getLogger(__name__)


def _check_code_pattern(spec: CatalogSpec, validator: Validator) -> InvalidPatternError | None:
    try:
        validator.validate(spec.code_pattern, CODE_PATTERN_PARAMETER_COUNT)
    except InvalidPatternError as e:
        error = InvalidPatternError(
            ErrorTemplate.code_pattern_invalid(spec.code_pattern, str(e)),
            pattern=spec.code_pattern,
            expected=e.expected,
            found=e.found,
        )
        error.__cause__ = e
        return error
    return None


def _iter_problems(
    spec: CatalogSpec,
    messages: tuple[MessageDescriptor, ...],
    validator: Validator | None,
) -> Iterator[tuple[MessageDescriptor | None, TextCrateError]]:
    """Yield (descriptor, error) for every problem, in catalog order.

    The descriptor is None for catalog-level problems.
    """
    if validator is not None:
        error = _check_code_pattern(spec, validator)
        if error is not None:
            yield None, error

    seen_ids: set[MessageId] = set()
    seen_names: set[MessageName] = set()

    for descriptor in messages:
        if descriptor.id in seen_ids:
            yield descriptor, CatalogError(ErrorTemplate.duplicate_message_id(descriptor.id))
        seen_ids.add(descriptor.id)

        if descriptor.name is not None:
            if descriptor.name in seen_names:
                yield descriptor, CatalogError(
                    ErrorTemplate.duplicate_message_name(descriptor.name, descriptor.id)
                )
            seen_names.add(descriptor.name)

        if validator is not None:
            try:
                validator.validate(descriptor.pattern, descriptor.parameter_count)
            except InvalidPatternError as e:
                yield descriptor, e


def _validator_for(formatter: Formatter) -> Validator | None:
    validator = formatter.validator
    if validator is None:
        logger.debug(
            "Formatter %s has no validator; patterns are not checked",
            type(formatter).__name__,
        )
    return validator


def validate_catalog(
    spec: CatalogSpec,
    messages: Iterable[MessageDescriptor],
    *,
    formatter: Formatter | str | None = None,
) -> ValidationResult:
    """Check a catalog without building it.

    Use this in CI or linting to see every problem at once. Unlike
    ``Catalog(...)``, this never raises for catalog content.

    Args:
        spec: Catalog description
        messages: Message descriptors
        formatter: Backend instance or registry name (default: "slf4j")

    Returns:
        ValidationResult with one diagnostic per problem

    Example:
        >>> result = validate_catalog(spec, descriptors)
        >>> if not result.is_valid:
        ...     print(result.format())
    """
    backend = resolve_formatter(formatter)
    diagnostics = []
    for descriptor, error in _iter_problems(spec, tuple(messages), _validator_for(backend)):
        diagnostic = error.diagnostic
        if diagnostic is None:
            # plain-message error from a third-party validator
            pattern = descriptor.pattern if descriptor is not None else spec.code_pattern
            diagnostic = ErrorTemplate.pattern_rejected(pattern, str(error))
        if descriptor is not None and diagnostic.message_id is None:
            diagnostic = dataclasses.replace(diagnostic, message_id=descriptor.id)
        diagnostics.append(diagnostic)

    if diagnostics:
        return ValidationResult.invalid(tuple(diagnostics))
    return ValidationResult.valid()


class Catalog:
    """Validated, read-only group of messages sharing an offset and code pattern.

    Messages are looked up by id or by name. Looking a message up with
    arguments yields a MessageInstance whose properties are the catalog
    properties overlaid with the message properties (message wins).

    Example:
        >>> spec = CatalogSpec(offset=20, code_pattern="BOR-{}", properties={"type": "error"})
        >>> catalog = Catalog(spec, [
        ...     MessageDescriptor(1, "'{}' is currently not available", 1,
        ...                       name="book_not_available"),
        ... ])
        >>> msg = catalog.message("book_not_available", "The Mythical Man-Month")
        >>> msg.code, msg.text
        ('BOR-21', "'The Mythical Man-Month' is currently not available")
    """

    __slots__ = ("_by_id", "_by_name", "_codes", "_formatter", "_properties", "_spec")

    def __init__(
        self,
        spec: CatalogSpec,
        messages: Iterable[MessageDescriptor] = (),
        *,
        formatter: Formatter | str | None = None,
    ) -> None:
        """Build and validate a catalog.

        Args:
            spec: Catalog description
            messages: Message descriptors
            formatter: Backend instance or registry name (default: "slf4j")

        Raises:
            InvalidPatternError: If the code pattern or a message pattern is invalid
            CatalogError: If two messages share an id or a name
            KeyError: If ``formatter`` names an unregistered backend
        """
        self._spec = spec
        self._formatter = resolve_formatter(formatter)

        descriptors = tuple(messages)
        for descriptor, error in _iter_problems(spec, descriptors, _validator_for(self._formatter)):
            if descriptor is None:
                logger.error("Invalid code pattern in catalog %s: %s", self.name, error)
            else:
                logger.error(
                    "Invalid message %d in catalog %s: %s", descriptor.id, self.name, error
                )
            raise error

        self._by_id: dict[MessageId, MessageDescriptor] = {}
        self._by_name: dict[MessageName, MessageDescriptor] = {}
        self._codes: dict[MessageId, MessageCode] = {}
        self._properties: dict[MessageId, Properties] = {}

        for descriptor in descriptors:
            self._by_id[descriptor.id] = descriptor
            if descriptor.name is not None:
                self._by_name[descriptor.name] = descriptor
            self._codes[descriptor.id] = derive_code(
                spec.offset, spec.code_pattern, descriptor.id, self._formatter
            )
            self._properties[descriptor.id] = MappingProxyType(
                {**spec.properties, **descriptor.properties}
            )
            logger.debug("Registered message %d: %s", descriptor.id, self._codes[descriptor.id])

        logger.info(
            "Loaded catalog %s: %d messages (offset=%d, code_pattern=%r)",
            self.name,
            len(self._by_id),
            spec.offset,
            spec.code_pattern,
        )

    @property
    def spec(self) -> CatalogSpec:
        """Catalog description this catalog was built from."""
        return self._spec

    @property
    def name(self) -> str:
        """Catalog name, or ``"<unnamed>"``."""
        return self._spec.name or "<unnamed>"

    @property
    def formatter(self) -> Formatter:
        """Backend used for message text and codes."""
        return self._formatter

    @property
    def descriptors(self) -> tuple[MessageDescriptor, ...]:
        """All message descriptors, in registration order."""
        return tuple(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[MessageDescriptor]:
        return iter(self._by_id.values())

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool):
            return False
        if isinstance(key, int):
            return key in self._by_id
        if isinstance(key, str):
            return key in self._by_name
        return False

    def __repr__(self) -> str:
        return f"Catalog(name={self.name!r}, offset={self._spec.offset}, messages={len(self)})"

    def get_descriptor(self, key: MessageKey) -> MessageDescriptor:
        """Look up a descriptor by id or name.

        Raises:
            CatalogError: If the catalog has no such message
        """
        if key not in self:
            raise CatalogError(ErrorTemplate.message_not_found(key))
        if isinstance(key, str):
            return self._by_name[key]
        return self._by_id[key]

    def code_for(self, key: MessageKey) -> MessageCode:
        """Public code of a message.

        Raises:
            CatalogError: If the catalog has no such message
        """
        return self._codes[self.get_descriptor(key).id]

    def properties_for(self, key: MessageKey) -> Properties:
        """Merged properties of a message (message-level wins).

        Raises:
            CatalogError: If the catalog has no such message
        """
        return self._properties[self.get_descriptor(key).id]

    def message(self, key: MessageKey, *arguments: object) -> MessageInstance:
        """Bind call-time arguments to a message.

        Argument count is not checked; formatting tolerates mismatches.

        Args:
            key: Message id or name
            *arguments: Values for the pattern placeholders

        Returns:
            MessageInstance; its text is formatted lazily

        Raises:
            CatalogError: If the catalog has no such message
        """
        descriptor = self.get_descriptor(key)
        return MessageInstance(
            code=self._codes[descriptor.id],
            pattern=descriptor.pattern,
            arguments=arguments,
            properties=self._properties[descriptor.id],
            formatter=self._formatter,
        )
