"""Audio playback exceptions."""

from .base import CollaboratorError


class AudioPlaybackError(CollaboratorError):
    """Raised when pronunciation audio cannot be fetched, decoded or played."""

    pass
