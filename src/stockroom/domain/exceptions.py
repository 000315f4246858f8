"""Domain-level exceptions.

Everything the user can trigger is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User input failed a presence or type check."""


class NotFoundError(DomainException):
    """A referenced product is not in the collection."""


class NoEditInProgressError(DomainException):
    """commit_edit() was called without a preceding begin_edit()."""


class PersistenceError(DomainException):
    """The durable slot could not be read or written.

    Raised inside the persistence adapter only; the adapter logs it and
    degrades (empty collection on load, dropped write on save).
    """
