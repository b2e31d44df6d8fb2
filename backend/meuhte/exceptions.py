"""Errors raised by session operations.

Every error is a semantic rejection: the transport surfaces ``message`` to the
requesting client verbatim and never retries.
"""


class GameError(Exception):
    """Base class for all session rejections."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ValidationError(GameError):
    """Malformed input, e.g. an empty name or answer."""
    pass


class CapacityError(GameError):
    """The room is full."""
    pass


class PermissionDenied(GameError):
    """A non-admin attempted an admin-only operation."""
    pass


class NotFoundError(GameError):
    """The referenced player does not exist."""
    pass


class AmbiguityError(GameError):
    """Name-based lookup matched more than one player."""
    pass


class PreconditionError(GameError):
    """The session is not in a state that allows the operation."""
    pass
