"""Configuration-related exceptions."""

from .base import YDictException


class ConfigurationError(YDictException):
    """Raised when the runtime configuration is incomplete."""

    pass


class DeckNotConfiguredError(ConfigurationError):
    """Raised when no Anki deck name has been configured."""

    pass
