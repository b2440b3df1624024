"""Data models for ydict."""

from .lookup import (
    DEFAULT_API_BASE_URL,
    AudioDirection,
    CrossReference,
    Definition,
    DictionaryEntry,
    LookupResult,
    Pronunciations,
    classify_entry,
    decode_lookup_result,
)
from .note import FlashcardNote
from .payload import PayloadNode
from .processing import LookupOutcome, ValidationIssue, ValidationResult

__all__ = [
    "DEFAULT_API_BASE_URL",
    "AudioDirection",
    "Pronunciations",
    "Definition",
    "CrossReference",
    "DictionaryEntry",
    "LookupResult",
    "classify_entry",
    "decode_lookup_result",
    "PayloadNode",
    "FlashcardNote",
    "LookupOutcome",
    "ValidationIssue",
    "ValidationResult",
]
