"""Shared constants for textcrate.

Centralizes the pattern syntax and rendering tokens used by the scanner,
validator, formatter and catalog packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern syntax: Placeholder marker and escape character
- Rendering: Tokens emitted for absent, failing and recursive arguments
- Extra arguments: Delimiters used when arguments outnumber placeholders

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "PLACEHOLDER",
    "ESCAPE_CHAR",
    "PLACEHOLDER_START",
    # Rendering
    "NULL_TEXT",
    "FAILED_RENDER_TEXT",
    "RECURSIVE_RENDER_TEXT",
    # Extra arguments
    "EXTRA_ARGUMENTS_PREFIX",
    "EXTRA_ARGUMENTS_SEPARATOR",
    "EXTRA_ARGUMENTS_SUFFIX",
    # Code patterns
    "CODE_PATTERN_PARAMETER_COUNT",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Positional placeholder marker. Replaced left to right by arguments.
PLACEHOLDER: str = "{}"

# A single escape character directly before PLACEHOLDER suppresses it.
# Two or more escape characters leave the placeholder live.
ESCAPE_CHAR: str = "\\"

# Opening half of the marker, emitted alone when an escaped marker is copied.
PLACEHOLDER_START: str = "{"

# ============================================================================
# RENDERING
# ============================================================================

# Text substituted for a None argument.
NULL_TEXT: str = "None"

# Text substituted for an argument whose __str__ raised.
FAILED_RENDER_TEXT: str = "[FAILED __str__()]"

# Text substituted for a sequence that contains itself.
RECURSIVE_RENDER_TEXT: str = "[...]"

# ============================================================================
# EXTRA ARGUMENTS
# ============================================================================

# Arguments without a matching placeholder are appended as " (a, b)".
EXTRA_ARGUMENTS_PREFIX: str = " ("
EXTRA_ARGUMENTS_SEPARATOR: str = ", "
EXTRA_ARGUMENTS_SUFFIX: str = ")"

# ============================================================================
# CODE PATTERNS
# ============================================================================

# A catalog code pattern receives exactly one value: offset + message id.
CODE_PATTERN_PARAMETER_COUNT: int = 1
