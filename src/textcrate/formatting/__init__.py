"""Pattern engine for ``{}`` placeholder patterns.

Provides placeholder scanning, pattern validation and argument substitution.
All functions are pure and safe for concurrent use.

Python 3.13+.
"""

from .config import DEFAULT_FORMATTER_CONFIG, FormatterConfig
from .formatter import DEFAULT_FORMATTER, Slf4jFormatter, format_message, render_argument
from .protocols import Formatter, Validator
from .registry import (
    DEFAULT_FORMATTER_NAME,
    available_formatters,
    get_formatter,
    register_formatter,
    resolve_formatter,
)
from .scanner import PlaceholderMatch, count_live_placeholders, iter_placeholders
from .validator import PatternValidator, validate_pattern

__all__ = [
    "DEFAULT_FORMATTER",
    "DEFAULT_FORMATTER_CONFIG",
    "DEFAULT_FORMATTER_NAME",
    "Formatter",
    "FormatterConfig",
    "PatternValidator",
    "PlaceholderMatch",
    "Slf4jFormatter",
    "Validator",
    "available_formatters",
    "count_live_placeholders",
    "format_message",
    "get_formatter",
    "iter_placeholders",
    "register_formatter",
    "render_argument",
    "resolve_formatter",
    "validate_pattern",
]
