"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was violated (always a caller bug)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PoolExhaustedError(DomainException):
    """No free resource is left in a pool.

    Recoverable: the caller decides whether to wait, queue or reject.
    """


class UnsupportedOperationError(DomainException):
    """An operation was attempted on the wrong kind of menu node."""


class UnsupportedForLeafError(UnsupportedOperationError):
    """A composite-only operation was attempted on a menu item."""


class UnsupportedForCategoryError(UnsupportedOperationError):
    """An item-only operation was attempted on a menu category."""
