"""Runtime message values returned to callers.

A MessageInstance binds a validated message to the arguments of one call.
The display text is never stored: ``text`` formats on every access and
``str()`` delegates to it, so an instance passed to ``logging`` as the
message object is only formatted if the record is actually emitted.

Example:
    >>> msg = catalog.message("book_not_available", "The Mythical Man-Month")
    >>> msg.code
    'BOR-21'
    >>> msg.pattern, msg.arguments
    ("'{}' is currently not available", ('The Mythical Man-Month',))
    >>> logger.warning(msg)  # formatted only if WARNING is enabled

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from textcrate.formatting import DEFAULT_FORMATTER, Formatter
from textcrate.types import MessageCode, Pattern, Properties

from .descriptors import freeze_properties

__all__ = ["MessageInstance"]


@dataclass(frozen=True, slots=True)
class MessageInstance:
    """One message bound to call-time arguments.

    Attributes:
        code: Public message code
        pattern: Raw message pattern, unformatted
        arguments: Raw call arguments, in placeholder order
        properties: Catalog properties overlaid with message properties
        formatter: Backend used to produce ``text``
    """

    code: MessageCode
    pattern: Pattern
    arguments: tuple[object, ...] = ()
    properties: Properties = field(default_factory=dict, hash=False)
    formatter: Formatter = field(default=DEFAULT_FORMATTER, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "properties", freeze_properties(self.properties))

    @property
    def text(self) -> str:
        """Formatted display text, computed on each access."""
        return self.formatter.format(self.pattern, *self.arguments)

    def __str__(self) -> str:
        return self.text

    def log(self, logger: logging.Logger, level: int = logging.INFO, **kwargs: Any) -> None:
        """Log this message with deferred formatting.

        The instance itself is the record message, so formatting only
        happens when a handler emits the record. ``message_code`` and
        ``message_properties`` are added to the record's ``extra``.

        Args:
            logger: Target logger
            level: Logging level
            **kwargs: Passed through to ``Logger.log`` (exc_info, stack_info, ...)
        """
        extra = {"message_code": self.code, "message_properties": dict(self.properties)}
        extra.update(kwargs.pop("extra", None) or {})
        kwargs.setdefault("stacklevel", 2)
        logger.log(level, self, extra=extra, **kwargs)
