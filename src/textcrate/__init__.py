"""textcrate - catalogs of parametrized, codeable messages.

Messages for errors, logs and user-facing text are declared apart from the
code that raises them. Each message has a public code derived from its
catalog, a ``{}`` pattern, and key/value properties.

Public API:
    Catalog - Validated group of messages sharing an offset and code pattern
    CatalogSpec - Catalog description (offset, code pattern, properties)
    MessageDescriptor - Message description (id, pattern, parameter count)
    MessageInstance - Message bound to call-time arguments, formatted lazily
    count_live_placeholders - Count placeholders that will be substituted
    validate_pattern - Check a pattern against a declared parameter count
    format_message - Substitute arguments into a pattern
    derive_code - Compute a public code from offset, code pattern and id

Exceptions:
    TextCrateError - Base exception class
    InvalidPatternError - Pattern rejected at catalog-load time
    CatalogError - Duplicate or unknown message

Submodules:
    textcrate.formatting - Pattern engine and pluggable backends
    textcrate.catalog - Descriptors, catalogs and message instances
    textcrate.diagnostics - Error codes, templates and validation results
"""

from .catalog import (
    Catalog,
    CatalogSpec,
    MessageDescriptor,
    MessageInstance,
    derive_code,
    validate_catalog,
)
from .diagnostics import CatalogError, InvalidPatternError, TextCrateError
from .formatting import (
    FormatterConfig,
    Slf4jFormatter,
    count_live_placeholders,
    format_message,
    validate_pattern,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textcrate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogSpec",
    "FormatterConfig",
    "InvalidPatternError",
    "MessageDescriptor",
    "MessageInstance",
    "Slf4jFormatter",
    "TextCrateError",
    "__version__",
    "count_live_placeholders",
    "derive_code",
    "format_message",
    "validate_catalog",
    "validate_pattern",
]
