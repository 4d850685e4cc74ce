"""Capability protocols for formatting backends.

A backend is any object that formats patterns; it may additionally expose a
validator for its pattern syntax. Backends are selected by configuration
(an instance or a registry name), not by subclassing.

Python 3.13+.
"""

from typing import Protocol, runtime_checkable

__all__ = ["Formatter", "Validator"]


@runtime_checkable
class Validator(Protocol):
    """Checks a pattern against the number of parameters a message declares."""

    def validate(self, pattern: str | None, parameter_count: int) -> None:
        """Raise InvalidPatternError if the pattern is not acceptable."""
        ...


@runtime_checkable
class Formatter(Protocol):
    """Binds a pattern and positional arguments into display text.

    Implementations must be total: ``format`` never raises for any
    pattern/argument combination.
    """

    def format(self, pattern: str, *arguments: object) -> str:
        """Return the text of ``pattern`` with ``arguments`` substituted."""
        ...

    @property
    def validator(self) -> Validator | None:
        """Validator for this backend's pattern syntax, if it has one."""
        ...
