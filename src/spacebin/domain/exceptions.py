"""Domain exceptions."""


class SpacebinError(Exception):
    """Base exception for Spacebin."""

    pass


class ValidationError(SpacebinError):
    """Validation failed for input data."""

    pass


class NotFound(SpacebinError):
    """Requested document was not found."""

    pass


class CollisionError(SpacebinError):
    """Generated identifier is already taken."""

    pass


class PersistenceError(SpacebinError):
    """Storage backend is unavailable or an operation on it failed."""

    pass
