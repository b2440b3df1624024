"""Service for interacting with Anki via AnkiConnect."""

import logging
from typing import Any

import requests

from ydict.config import YDictConfig
from ydict.exceptions import AnkiConnectionError, CardCreationError
from ydict.models import FlashcardNote

logger = logging.getLogger(__name__)

ANKICONNECT_VERSION = 6


class AnkiService:
    """Service for interacting with Anki via AnkiConnect (stateless service)."""

    def __init__(self, config: YDictConfig):
        """Initialize the Anki service.

        Args:
            config: Configuration for Anki integration
        """
        self.config = config

    def _invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        """Send one AnkiConnect action and return its result.

        Raises:
            AnkiConnectionError: If AnkiConnect cannot be reached
            CardCreationError: If AnkiConnect answers with an error
        """
        payload: dict[str, Any] = {"action": action, "version": ANKICONNECT_VERSION}
        if params is not None:
            payload["params"] = params
        return self._post(payload)

    def _post(self, payload: dict[str, Any]) -> Any:
        action = payload.get("action")
        try:
            response = requests.post(
                self.config.ankiconnect_url,
                json=payload,
                timeout=self.config.anki_timeout,
            )
        except requests.exceptions.ConnectionError as e:
            raise AnkiConnectionError("Cannot connect to AnkiConnect. Is Anki running?") from e
        except requests.RequestException as e:
            raise AnkiConnectionError(f"AnkiConnect request failed: {e}") from e

        if response.status_code != 200:
            raise CardCreationError(
                f"AnkiConnect {action} got an unexpected status code {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise CardCreationError(f"AnkiConnect {action} returned an unreadable body") from e

        if not isinstance(result, dict):
            raise CardCreationError(f"AnkiConnect {action} returned an unreadable body")

        if result.get("error"):
            raise CardCreationError(f"AnkiConnect error during {action}: {result['error']}")

        return result.get("result")

    def build_note_payload(self, note: FlashcardNote) -> dict[str, Any]:
        """Build the ``addNote`` request for a flashcard.

        Args:
            note: Note to add

        Returns:
            AnkiConnect request body
        """
        note_body: dict[str, Any] = {
            "deckName": note.deck,
            "modelName": self.config.anki_note_type,
            "fields": {
                "Front": note.front,
                "Back": note.back,
            },
            "options": {
                "allowDuplicate": note.allow_duplicate,
            },
            "tags": list(note.tags),
        }
        if note.has_audio:
            note_body["audio"] = [
                {
                    "url": note.audio_url,
                    "filename": note.audio_filename,
                    "fields": ["Front"],
                    "skipHash": "",
                }
            ]

        return {
            "action": "addNote",
            "version": ANKICONNECT_VERSION,
            "params": {"note": note_body},
        }

    def add_note(self, note: FlashcardNote) -> int | None:
        """Create a single Anki note.

        Args:
            note: Note to add

        Returns:
            ID of the created note

        Raises:
            AnkiConnectionError: If cannot connect to AnkiConnect
            CardCreationError: If AnkiConnect rejects the note
        """
        logger.debug(f"Adding {note} to Anki")
        note_id = self._post(self.build_note_payload(note))
        logger.info(f"Created Anki note {note_id} for '{note.front}'")
        return note_id

    def check_connection(self) -> int:
        """Get the AnkiConnect API version.

        Raises:
            AnkiConnectionError: If AnkiConnect is not reachable or misbehaves
        """
        try:
            version = self._invoke("version")
        except CardCreationError as e:
            raise AnkiConnectionError(str(e)) from e
        if version is None:
            raise AnkiConnectionError("AnkiConnect did not report a version")
        return int(version)

    def deck_exists(self, deck: str) -> bool:
        """Check if a deck exists in the collection.

        Raises:
            AnkiConnectionError: If AnkiConnect is not reachable or misbehaves
        """
        try:
            decks = self._invoke("deckNames") or []
        except CardCreationError as e:
            raise AnkiConnectionError(str(e)) from e
        return deck in decks
