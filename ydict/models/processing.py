"""Data models for lookup outcomes."""

from dataclasses import dataclass, field


@dataclass
class LookupOutcome:
    """Result of running one lookup through the processor."""

    word: str
    report: str = ""
    note_id: int | None = None
    audio_finished: bool | None = None  # None when playback was not requested
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if the lookup finished without reported errors."""
        return len(self.errors) == 0

    @property
    def card_created(self) -> bool:
        """Check if an Anki note was created."""
        return self.note_id is not None

    def __str__(self) -> str:
        return (
            f"LookupOutcome(word='{self.word}', card_created={self.card_created}, "
            f"errors={len(self.errors)})"
        )


@dataclass
class ValidationIssue:
    """A single validation issue."""

    component: str  # Component that failed (e.g., "AnkiConnect", "ffmpeg")
    severity: str  # "ERROR" or "WARNING"
    message: str  # Description of the issue

    def __str__(self) -> str:
        return f"[{self.severity}] {self.component}: {self.message}"


@dataclass
class ValidationResult:
    """Result of setup validation."""

    deck_configured: bool
    ankiconnect_ok: bool
    deck_exists: bool
    ffmpeg_ok: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        """Check if every check needed for flashcard creation passed."""
        return all([self.deck_configured, self.ankiconnect_ok, self.deck_exists])

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warning-level issues."""
        return any(issue.severity == "WARNING" for issue in self.issues)

    def get_errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [issue for issue in self.issues if issue.severity == "ERROR"]

    def get_warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [issue for issue in self.issues if issue.severity == "WARNING"]

    def __str__(self) -> str:
        status = "PASSED" if self.all_passed else "FAILED"
        return (
            f"ValidationResult({status}, errors={len(self.get_errors())}, "
            f"warnings={len(self.get_warnings())})"
        )
