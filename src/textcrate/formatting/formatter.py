"""Default formatting backend for ``{}`` patterns.

Substitutes positional arguments into live placeholders left to right, the
same way ``org.slf4j.helpers.MessageFormatter`` does, so the same pattern
can be handed to an SLF4J-style logger for deferred construction and still
produce identical text.

Substitution Rules:
    - ``{}`` is replaced by the next argument.
    - ``\\{}`` (one backslash) is emitted as ``{}`` without the backslash and
      does not consume an argument.
    - ``\\\\{}`` (two or more backslashes) drops one backslash, keeps the
      rest, and is replaced by the next argument.
    - Once every argument has been consumed, the rest of the pattern is
      copied verbatim, escapes included. A call with no arguments returns
      the pattern unchanged.
    - Arguments left over after the last placeholder are appended as
      `` (a, b)`` unless FormatterConfig.append_extra_arguments is False.

Argument Rendering:
    - None renders as FormatterConfig.null_text.
    - Lists and tuples render as ``[a, b]`` with elements rendered by the
      same rules; a sequence that contains itself renders as ``[...]``.
    - An argument whose ``__str__`` raises renders as
      ``[FAILED __str__()]``; the failure is logged at WARNING.
    - Everything else uses ``str()``.

Formatting never raises.

Thread Safety:
    Slf4jFormatter is immutable. Safe for concurrent use.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from textcrate.constants import (
    ESCAPE_CHAR,
    FAILED_RENDER_TEXT,
    PLACEHOLDER,
    PLACEHOLDER_START,
    RECURSIVE_RENDER_TEXT,
)

from .config import DEFAULT_FORMATTER_CONFIG, FormatterConfig
from .validator import PatternValidator

__all__ = [
    "DEFAULT_FORMATTER",
    "Slf4jFormatter",
    "format_message",
    "render_argument",
]

logger = logging.getLogger(__name__)

_VALIDATOR = PatternValidator()


def _is_escaped(pattern: str, marker_index: int) -> bool:
    return marker_index >= 1 and pattern[marker_index - 1] == ESCAPE_CHAR


def _is_double_escaped(pattern: str, marker_index: int) -> bool:
    return marker_index >= 2 and pattern[marker_index - 2] == ESCAPE_CHAR


def render_argument(
    value: object,
    config: FormatterConfig = DEFAULT_FORMATTER_CONFIG,
) -> str:
    """Convert one argument to the text substituted for its placeholder.

    Args:
        value: Argument value
        config: Rendering configuration

    Returns:
        Rendered text; never raises

    Example:
        >>> render_argument(None)
        'None'
        >>> render_argument([1, "a", None])
        '[1, a, None]'
    """
    return _render(value, config, set())


def _render(value: object, config: FormatterConfig, seen: set[int]) -> str:
    if value is None:
        return config.null_text

    if isinstance(value, (list, tuple)):
        if id(value) in seen:
            return RECURSIVE_RENDER_TEXT
        seen.add(id(value))
        try:
            return "[" + ", ".join(_render(item, config, seen) for item in value) + "]"
        finally:
            seen.discard(id(value))

    try:
        return str(value)
    except Exception as e:
        logger.warning(
            "Failed __str__() invocation on an object of type [%s]: %s",
            type(value).__name__,
            e,
        )
        return FAILED_RENDER_TEXT


@dataclass(frozen=True, slots=True)
class Slf4jFormatter:
    """SLF4J-compatible formatter and validator for ``{}`` patterns.

    Implements both the Formatter and the Validator capability. Useful when
    the same messages are also passed to a logging API for deferred
    construction.

    Attributes:
        config: Rendering configuration

    Example:
        >>> formatter = Slf4jFormatter()
        >>> formatter.format("'{}' is currently not available", "The Mythical Man-Month")
        "'The Mythical Man-Month' is currently not available"
    """

    config: FormatterConfig = field(default=DEFAULT_FORMATTER_CONFIG)

    @property
    def validator(self) -> PatternValidator:
        """The validator for this pattern syntax."""
        return _VALIDATOR

    def format(self, pattern: str, *arguments: object) -> str:
        """Substitute ``arguments`` into the live placeholders of ``pattern``.

        Args:
            pattern: Pattern with ``{}`` placeholders
            *arguments: Positional values, consumed left to right

        Returns:
            Formatted text
        """
        if not arguments:
            return pattern

        parts: list[str] = []
        start = 0
        consumed = 0

        while consumed < len(arguments):
            index = pattern.find(PLACEHOLDER, start)
            if index == -1:
                break

            if _is_escaped(pattern, index):
                if not _is_double_escaped(pattern, index):
                    # escaped marker: drop the backslash, keep the braces,
                    # and retry the same argument on the next marker
                    parts.append(pattern[start : index - 1])
                    parts.append(PLACEHOLDER_START)
                    start = index + 1
                    continue
                # escaped backslash: drop one and substitute
                parts.append(pattern[start : index - 1])
            else:
                parts.append(pattern[start:index])

            parts.append(render_argument(arguments[consumed], self.config))
            consumed += 1
            start = index + len(PLACEHOLDER)

        parts.append(pattern[start:])

        if consumed < len(arguments) and self.config.append_extra_arguments:
            parts.append(self._render_extra(arguments[consumed:]))

        return "".join(parts)

    def validate(self, pattern: str | None, parameter_count: int) -> None:
        """Validate ``pattern``; see textcrate.formatting.validate_pattern()."""
        _VALIDATOR.validate(pattern, parameter_count)

    def _render_extra(self, extra: tuple[object, ...]) -> str:
        rendered = self.config.extra_arguments_separator.join(
            render_argument(value, self.config) for value in extra
        )
        return self.config.extra_arguments_prefix + rendered + self.config.extra_arguments_suffix


DEFAULT_FORMATTER: Slf4jFormatter = Slf4jFormatter()


def format_message(pattern: str, *arguments: object) -> str:
    """Format ``pattern`` with the default backend.

    Example:
        >>> format_message("{} of {}", 3, 10)
        '3 of 10'
    """
    return DEFAULT_FORMATTER.format(pattern, *arguments)
