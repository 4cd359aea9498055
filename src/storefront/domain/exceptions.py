"""Domain-level exceptions.

Expected business-rule refusals (out of stock, unknown id, empty cart) are
*not* exceptions: they come back as ``False`` / ``None`` from the stores.
The classes below cover invalid values and storage faults, so callers at
the edges (CLI, persistence gateway) can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or catalog entry violates an invariant."""


class PersistenceError(DomainException):
    """The storage medium could not be read or written."""
