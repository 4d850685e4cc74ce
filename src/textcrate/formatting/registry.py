"""Named registry of formatting backends.

Lets a catalog pick its backend by configuration value (e.g. ``"slf4j"``)
instead of by import. The default backend is registered at import time.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading

from .formatter import DEFAULT_FORMATTER
from .protocols import Formatter

__all__ = [
    "DEFAULT_FORMATTER_NAME",
    "available_formatters",
    "get_formatter",
    "register_formatter",
    "resolve_formatter",
]

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER_NAME = "slf4j"

_lock = threading.Lock()
_formatters: dict[str, Formatter] = {DEFAULT_FORMATTER_NAME: DEFAULT_FORMATTER}


def register_formatter(name: str, formatter: Formatter, *, replace: bool = False) -> None:
    """Register a backend under ``name``.

    Args:
        name: Registry key
        formatter: Backend instance
        replace: Allow overwriting an existing registration

    Raises:
        TypeError: If ``formatter`` does not implement the Formatter protocol
        ValueError: If ``name`` is empty or already taken and ``replace`` is False
    """
    if not name:
        msg = "formatter name cannot be empty"
        raise ValueError(msg)
    if not isinstance(formatter, Formatter):
        msg = f"{type(formatter).__name__} does not implement the Formatter protocol"
        raise TypeError(msg)

    with _lock:
        if name in _formatters and not replace:
            msg = f"formatter '{name}' is already registered"
            raise ValueError(msg)
        _formatters[name] = formatter

    logger.debug("Registered formatter: %s (%s)", name, type(formatter).__name__)


def get_formatter(name: str) -> Formatter:
    """Look up a registered backend.

    Raises:
        KeyError: If no backend is registered under ``name``
    """
    with _lock:
        try:
            return _formatters[name]
        except KeyError:
            msg = f"unknown formatter '{name}'; available: {sorted(_formatters)}"
            raise KeyError(msg) from None


def available_formatters() -> tuple[str, ...]:
    """Names of all registered backends, sorted."""
    with _lock:
        return tuple(sorted(_formatters))


def resolve_formatter(formatter: Formatter | str | None) -> Formatter:
    """Turn an instance, a registry name or None into a backend instance."""
    if formatter is None:
        return DEFAULT_FORMATTER
    if isinstance(formatter, str):
        return get_formatter(formatter)
    return formatter
