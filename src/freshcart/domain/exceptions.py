"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidTransitionError(DomainException):
    """The order lifecycle does not allow the requested status change."""


class ConflictError(DomainException):
    """A concurrent writer changed the order status first."""


class StorageError(DomainException):
    """The persistence layer could not be read or written."""


class AuthorizationError(DomainException):
    """The caller is not allowed to perform an administrative action."""
