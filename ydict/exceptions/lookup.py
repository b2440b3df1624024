"""Lookup decoding and rendering exceptions."""

from .base import CollaboratorError, YDictException


class DecodeError(YDictException):
    """Raised when a dictionary payload does not match the expected structure."""

    pass


class InvalidWordError(YDictException):
    """Raised when a payload decodes cleanly but carries no translation at all."""

    pass


class TemplateRenderError(YDictException):
    """Raised when the flashcard template cannot be compiled or rendered."""

    pass


class TranslationError(CollaboratorError):
    """Raised when the dictionary API cannot be reached or answers with an error."""

    pass
