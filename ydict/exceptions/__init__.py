"""Custom exceptions for ydict."""

from .anki import AnkiConnectionError, CardCreationError
from .audio import AudioPlaybackError
from .base import CollaboratorError, YDictException
from .lookup import DecodeError, InvalidWordError, TemplateRenderError, TranslationError
from .validation import ConfigurationError, DeckNotConfiguredError

__all__ = [
    "YDictException",
    "CollaboratorError",
    "DecodeError",
    "InvalidWordError",
    "TemplateRenderError",
    "TranslationError",
    "AnkiConnectionError",
    "CardCreationError",
    "AudioPlaybackError",
    "ConfigurationError",
    "DeckNotConfiguredError",
]
