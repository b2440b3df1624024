"""Base exception classes for ydict."""


class YDictException(Exception):
    """Base exception for all ydict errors.

    All custom exceptions in the ydict package should inherit
    from this base class for consistent error handling.
    """

    pass


class CollaboratorError(YDictException):
    """Raised when an external collaborator (network, Anki, audio) fails."""

    pass
