"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or violates a business rule."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class ReferentialIntegrityError(DomainException):
    """A foreign key does not resolve, or a row is still referenced."""


class StorageUnavailableError(DomainException):
    """The persistence layer cannot be reached."""
