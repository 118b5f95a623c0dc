"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested product record does not exist."""


class AlreadyExistsError(DomainException):
    """A product record with the same ID is already in the world state."""


class ClockError(DomainException):
    """The transaction context could not supply a timestamp."""


class StoreReadError(DomainException):
    """Reading from the world state failed."""


class StoreWriteError(DomainException):
    """Writing to the world state failed."""


class DecodeError(DomainException):
    """Stored bytes could not be decoded into a product record."""
