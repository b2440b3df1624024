"""Orchestrator for a single dictionary lookup."""

from __future__ import annotations

import logging

from ydict.config import YDictConfig
from ydict.exceptions import CollaboratorError, DeckNotConfiguredError
from ydict.interfaces import PresenterProtocol, Translator
from ydict.models import AudioDirection, FlashcardNote, LookupOutcome, LookupResult
from ydict.services import AnkiService, AudioService, PresentationService

logger = logging.getLogger(__name__)


class LookupProcessor:
    """Orchestrate lookup, report, flashcard creation and playback for one word."""

    def __init__(
        self,
        config: YDictConfig,
        translator: Translator,
        presentation_service: PresentationService,
        presenter: PresenterProtocol,
        anki_service: AnkiService | None = None,
        audio_service: AudioService | None = None,
    ):
        """Initialize the lookup processor.

        Args:
            config: Configuration
            translator: Dictionary backend
            presentation_service: Report and flashcard renderer
            presenter: Output presenter
            anki_service: Optional Anki integration service (required for add_to_anki)
            audio_service: Optional audio service (required for speak)
        """
        self.config = config
        self.translator = translator
        self.presentation_service = presentation_service
        self.presenter = presenter
        self.anki_service = anki_service
        self.audio_service = audio_service

    def process(
        self,
        word: str,
        add_to_anki: bool = False,
        speak: bool = False,
        allow_duplicate: bool = False,
        accent: AudioDirection = AudioDirection.US,
    ) -> LookupOutcome:
        """Look up a word, print its report, then run the optional side effects.

        The report is always shown before any flashcard or audio work, and
        failures of those later steps never take it back. A flashcard
        failure ends the invocation, so playback is skipped.

        Args:
            word: Word to look up
            add_to_anki: Create an Anki note for the word
            speak: Play the pronunciation
            allow_duplicate: Let Anki accept a duplicate note
            accent: Accent used for playback

        Returns:
            LookupOutcome describing what happened

        Raises:
            TranslationError: If the dictionary API cannot be reached
            DecodeError: If the payload is malformed
            InvalidWordError: If the word has no translation
        """
        result = self.translator.translate(word)

        outcome = LookupOutcome(word=word)
        outcome.report = self.presentation_service.render_report(result)
        self.presenter.show_report(outcome.report)

        if add_to_anki:
            try:
                outcome.note_id = self._add_to_anki(result, allow_duplicate)
            except (DeckNotConfiguredError, CollaboratorError) as e:
                outcome.errors.append(str(e))
                self.presenter.show_error(str(e))
                return outcome
            self.presenter.show_success(f"Added '{word}' to Anki")

        if speak:
            outcome.audio_finished = self._speak(result, accent)

        return outcome

    def _add_to_anki(self, result: LookupResult, allow_duplicate: bool) -> int | None:
        if self.anki_service is None:
            raise ValueError("add_to_anki requires an AnkiService")

        deck = self.config.require_deck_name()

        back = self.presentation_service.render_flashcard_back(result)
        if not back:
            self.presenter.show_warning("Flashcard body could not be rendered, adding it empty")

        note = FlashcardNote(
            deck=deck,
            front=self.presentation_service.front_label(result),
            back=back,
            audio_url=result.audio_link(AudioDirection.US),
            allow_duplicate=allow_duplicate,
            tags=[self.config.anki_note_tag],
        )
        return self.anki_service.add_note(note)

    def _speak(self, result: LookupResult, accent: AudioDirection) -> bool:
        if self.audio_service is None:
            raise ValueError("speak requires an AudioService")

        finished = self.audio_service.play_with_timeout(result.audio_link(accent))
        logger.debug(f"Audio for '{result.queried_word}' finished={finished}")
        return finished
