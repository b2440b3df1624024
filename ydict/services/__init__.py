"""Business logic services for ydict."""

from .anki_service import AnkiService
from .audio_service import AudioService
from .presentation_service import EntryView, PresentationService
from .translation_service import TranslationService
from .validation_service import ValidationService

__all__ = [
    "TranslationService",
    "PresentationService",
    "EntryView",
    "AnkiService",
    "AudioService",
    "ValidationService",
]
