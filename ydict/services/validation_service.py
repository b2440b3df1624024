"""Service for validating flashcard and audio setup."""

import subprocess

from ydict.config import YDictConfig
from ydict.exceptions import AnkiConnectionError
from ydict.models import ValidationIssue, ValidationResult

from .anki_service import AnkiService


class ValidationService:
    """Validate Anki and audio prerequisites (stateless service)."""

    def __init__(self, config: YDictConfig, anki_service: AnkiService | None = None):
        """Initialize the validation service.

        Args:
            config: Configuration to validate against
            anki_service: AnkiConnect client (created from config if omitted)
        """
        self.config = config
        self.anki_service = anki_service or AnkiService(config)

    def validate_setup(self) -> ValidationResult:
        """Run all validation checks.

        Returns:
            ValidationResult with status of each check

        Note:
            This method never raises exceptions - all errors are captured
            in the ValidationResult.
        """
        issues = []

        deck_configured = self.config.has_deck
        if not deck_configured:
            issues.append(
                ValidationIssue(
                    component="Anki Deck",
                    severity="ERROR",
                    message="ANKI_DECK_NAME is not set",
                )
            )

        ankiconnect_ok, anki_msg = self._check_ankiconnect()
        if not ankiconnect_ok:
            issues.append(
                ValidationIssue(
                    component="AnkiConnect",
                    severity="ERROR",
                    message=anki_msg,
                )
            )

        # Only meaningful once AnkiConnect answers and a deck name is known
        deck_ok = False
        if ankiconnect_ok and deck_configured:
            deck_ok, deck_msg = self._check_deck_exists()
            if not deck_ok:
                issues.append(
                    ValidationIssue(
                        component="Anki Deck",
                        severity="ERROR",
                        message=deck_msg,
                    )
                )

        # MP3 decoding goes through ffmpeg; only --speak needs it
        ffmpeg_ok, ffmpeg_msg = self._check_ffmpeg()
        if not ffmpeg_ok:
            issues.append(
                ValidationIssue(
                    component="ffmpeg",
                    severity="WARNING",
                    message=ffmpeg_msg,
                )
            )

        return ValidationResult(
            deck_configured=deck_configured,
            ankiconnect_ok=ankiconnect_ok,
            deck_exists=deck_ok,
            ffmpeg_ok=ffmpeg_ok,
            issues=issues,
        )

    def _check_ankiconnect(self) -> tuple[bool, str]:
        """Check if AnkiConnect is running and accessible.

        Returns:
            Tuple of (success, message)
        """
        try:
            version = self.anki_service.check_connection()
            return True, f"AnkiConnect v{version} is running"
        except AnkiConnectionError as e:
            return False, str(e)

    def _check_deck_exists(self) -> tuple[bool, str]:
        """Check if the configured deck exists in Anki.

        Returns:
            Tuple of (success, message)
        """
        deck_name = self.config.anki_deck_name
        try:
            if self.anki_service.deck_exists(deck_name):
                return True, f"Deck '{deck_name}' found"
            return False, f"Deck '{deck_name}' not found"
        except AnkiConnectionError as e:
            return False, f"Error checking deck: {e}"

    def _check_ffmpeg(self) -> tuple[bool, str]:
        """Check if ffmpeg is installed and accessible.

        Returns:
            Tuple of (success, message)
        """
        try:
            result = subprocess.run(
                ["ffmpeg", "-version"],
                capture_output=True,
                text=True,
                timeout=10,
            )

            if result.returncode != 0:
                return False, "ffmpeg returned non-zero exit code"

            version_line = result.stdout.split("\n")[0] if result.stdout else "unknown"
            return True, version_line

        except FileNotFoundError:
            return False, "ffmpeg not found. Install it to enable pronunciation playback"
        except subprocess.TimeoutExpired:
            return False, "ffmpeg check timed out"
