"""Domain-level exceptions.

Only invariant violations on value objects are raised as exceptions.
User-facing failures (unknown product, empty cart, bad menu input) are
returned as sentinels by the component that detects them, so the menu
loop always regains control.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
