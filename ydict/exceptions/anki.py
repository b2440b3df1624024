"""Anki and AnkiConnect related exceptions."""

from .base import CollaboratorError


class AnkiConnectionError(CollaboratorError):
    """Raised when cannot connect to AnkiConnect."""

    pass


class CardCreationError(CollaboratorError):
    """Raised when card creation fails."""

    pass
