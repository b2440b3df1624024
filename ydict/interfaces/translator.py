"""Protocol for dictionary translation backends."""

from typing import Protocol

from ydict.models import LookupResult


class Translator(Protocol):
    """Interface for a backend that turns a word into a LookupResult.

    TranslationService implements this against the Youdao API; tests and
    offline callers can supply their own.
    """

    def translate(self, word: str) -> LookupResult:
        """Look up a single word.

        Args:
            word: Word as typed by the user.

        Returns:
            A valid (non-empty) LookupResult.

        Raises:
            TranslationError: If the backend cannot be reached.
            DecodeError: If the backend answered with a malformed payload.
            InvalidWordError: If the backend knows nothing about the word.
        """
        ...
