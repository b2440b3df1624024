"""Data models for Anki flashcard notes."""

from dataclasses import dataclass, field


@dataclass
class FlashcardNote:
    """A Basic-model Anki note with a pronunciation attachment."""

    deck: str
    front: str
    back: str
    audio_url: str = ""
    allow_duplicate: bool = False
    tags: list[str] = field(default_factory=lambda: ["from-yd"])

    @property
    def audio_filename(self) -> str:
        """Filename the attached audio is stored under in Anki's media folder."""
        return f"{self.front}.mp3"

    @property
    def has_audio(self) -> bool:
        """Check if the note carries an audio URL."""
        return bool(self.audio_url)

    def __str__(self) -> str:
        return f"FlashcardNote(deck='{self.deck}', front='{self.front}')"
