"""Configuration classes for ydict."""

from dataclasses import dataclass

from ydict.exceptions import DeckNotConfiguredError


@dataclass(frozen=True)
class YDictConfig:
    """Immutable configuration for dictionary lookups.

    Built once at startup and handed to every service, so nothing below
    the CLI reads the process environment.
    """

    # Youdao API settings
    youdao_api_url: str = "http://dict.youdao.com"
    youdao_keyfrom: str = "mac.main"
    youdao_vendor: str = "appstore"
    youdao_app_version: str = "2.4.0"
    youdao_client: str = "macdict"
    translate_timeout: float = 3.0  # Seconds

    # Anki settings
    ankiconnect_url: str = "http://localhost:8765"
    anki_deck_name: str = ""
    anki_note_type: str = "Basic"
    anki_note_tag: str = "from-yd"
    anki_timeout: float = 3.0

    # Audio settings
    audio_wait_timeout: float = 2.0  # Seconds to wait for playback before exiting
    audio_fetch_timeout: float = 5.0

    def __post_init__(self):
        """Normalize URLs and the deck name."""
        object.__setattr__(self, "youdao_api_url", self.youdao_api_url.rstrip("/"))
        object.__setattr__(self, "anki_deck_name", self.anki_deck_name.strip())

    @property
    def has_deck(self) -> bool:
        """Check if an Anki deck name is configured."""
        return bool(self.anki_deck_name)

    def require_deck_name(self) -> str:
        """Return the configured deck name.

        Raises:
            DeckNotConfiguredError: If no deck name is set
        """
        if not self.has_deck:
            raise DeckNotConfiguredError(
                "Anki Error: no deck name found, please set env ANKI_DECK_NAME "
                "to your personal deck"
            )
        return self.anki_deck_name
