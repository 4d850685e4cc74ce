"""Formatter configuration.

Provides a single frozen dataclass that encapsulates the rendering choices
of the default formatting backend.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from textcrate.constants import (
    EXTRA_ARGUMENTS_PREFIX,
    EXTRA_ARGUMENTS_SEPARATOR,
    EXTRA_ARGUMENTS_SUFFIX,
    NULL_TEXT,
)

__all__ = ["DEFAULT_FORMATTER_CONFIG", "FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable configuration for Slf4jFormatter.

    All fields have sensible defaults; ``FormatterConfig()`` reproduces the
    standard behavior.

    Attributes:
        null_text: Text substituted for a None argument (default: "None").
        append_extra_arguments: Append arguments that have no placeholder
            after the formatted text (default: True). When False they are
            dropped silently.
        extra_arguments_prefix: Text before the appended arguments.
        extra_arguments_separator: Text between appended arguments.
        extra_arguments_suffix: Text after the appended arguments.

    Example:
        >>> config = FormatterConfig(null_text="null")
        >>> Slf4jFormatter(config).format("value: {}", None)
        'value: null'
    """

    null_text: str = NULL_TEXT
    append_extra_arguments: bool = True
    extra_arguments_prefix: str = EXTRA_ARGUMENTS_PREFIX
    extra_arguments_separator: str = EXTRA_ARGUMENTS_SEPARATOR
    extra_arguments_suffix: str = EXTRA_ARGUMENTS_SUFFIX

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If any text field is not a string.
        """
        for name in (
            "null_text",
            "extra_arguments_prefix",
            "extra_arguments_separator",
            "extra_arguments_suffix",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"{name} must be a string, got {type(value).__name__}"
                raise TypeError(msg)


DEFAULT_FORMATTER_CONFIG: FormatterConfig = FormatterConfig()
