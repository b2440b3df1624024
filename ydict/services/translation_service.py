"""Service for fetching word translations from the Youdao dictionary API."""

import logging

import requests

from ydict.config import YDictConfig
from ydict.exceptions import InvalidWordError, TranslationError
from ydict.models import LookupResult, decode_lookup_result

logger = logging.getLogger(__name__)


class TranslationService:
    """Fetch and decode Youdao ``jsonapi`` lookups (stateless service)."""

    def __init__(self, config: YDictConfig):
        """Initialize the translation service.

        Args:
            config: Configuration holding the API endpoint and timeout
        """
        self.config = config

    @property
    def endpoint(self) -> str:
        return f"{self.config.youdao_api_url}/jsonapi"

    def build_params(self, word: str) -> dict[str, str]:
        """Build the query string for a lookup."""
        return {
            "q": word,
            "doctype": "json",
            "keyfrom": self.config.youdao_keyfrom,
            "vendor": self.config.youdao_vendor,
            "appVer": self.config.youdao_app_version,
            "client": self.config.youdao_client,
            "jsonversion": "2",
        }

    def fetch(self, word: str) -> bytes:
        """Fetch the raw JSON payload for a word.

        Raises:
            TranslationError: On transport failure or non-200 status
        """
        try:
            response = requests.get(
                self.endpoint,
                params=self.build_params(word),
                timeout=self.config.translate_timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TranslationError(f"Dictionary request timed out for '{word}'") from e
        except requests.RequestException as e:
            raise TranslationError(f"Cannot reach dictionary API: {e}") from e

        if response.status_code != 200:
            raise TranslationError(
                f"Dictionary API returned unexpected status code {response.status_code}"
            )

        return response.content

    def translate(self, word: str) -> LookupResult:
        """Look up a word.

        Args:
            word: Word to translate

        Returns:
            Decoded, valid LookupResult

        Raises:
            TranslationError: If the API cannot be reached
            DecodeError: If the payload is malformed
            InvalidWordError: If neither the EC nor the Collins block has content
        """
        logger.debug(f"Looking up '{word}' at {self.endpoint}")
        payload = self.fetch(word)

        result = decode_lookup_result(payload, word, api_base_url=self.config.youdao_api_url)
        if result.is_invalid:
            raise InvalidWordError(f"{word} maybe a invalid word")

        logger.debug(f"Decoded {result}")
        return result
