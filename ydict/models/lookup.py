"""Data models for a decoded dictionary lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .payload import PayloadNode

DEFAULT_API_BASE_URL = "http://dict.youdao.com"


class AudioDirection(Enum):
    """Pronunciation accent for audio links."""

    US = "us"
    UK = "uk"


@dataclass(frozen=True)
class Pronunciations:
    """Phonetic symbols and speech references from the EC block."""

    uk_phonetic: str = ""
    us_phonetic: str = ""
    uk_audio_ref: str = ""
    us_audio_ref: str = ""

    def audio_ref(self, direction: AudioDirection) -> str:
        """Get the upstream speech reference for an accent."""
        return self.us_audio_ref if direction is AudioDirection.US else self.uk_audio_ref


@dataclass(frozen=True)
class Definition:
    """A Collins entry with a translation and an example sentence pair."""

    part_of_speech: str
    pos_qualifier: str
    translation: str
    example_english: str
    example_chinese: str


@dataclass(frozen=True)
class CrossReference:
    """A Collins entry pointing at another headword instead of defining one."""

    target_word: str


DictionaryEntry = Definition | CrossReference


def classify_entry(entry: PayloadNode) -> DictionaryEntry | None:
    """Classify one raw Collins ``entry`` item.

    The API carries no discriminator: entries with an example sentence are
    definitions, entries without one but with a "see also" pointer are
    cross-references. Anything else classifies to None.

    Args:
        entry: Raw item of ``collins_entries[0].entries.entry``

    Returns:
        Definition, CrossReference, or None
    """
    tran_entry = entry.first("tran_entry")

    sentences = tran_entry.object("exam_sents").array("sent")
    if sentences:
        pos_entry = tran_entry.object("pos_entry")
        return Definition(
            part_of_speech=pos_entry.string("pos"),
            pos_qualifier=pos_entry.string("pos_tips"),
            translation=tran_entry.string("tran"),
            example_english=sentences[0].string("eng_sent"),
            example_chinese=sentences[0].string("chn_sent"),
        )

    see_also = tran_entry.object("seeAlsos").array("seeAlso")
    if see_also:
        return CrossReference(target_word=see_also[0].string("seeword"))

    return None


@dataclass(frozen=True)
class LookupResult:
    """Decoded dictionary response for one queried word."""

    queried_word: str
    exam_tags: tuple[str, ...] = ()
    pronunciations: Pronunciations | None = None
    gloss_entries: tuple[str, ...] = ()
    # None marks a raw entry that was neither a definition nor a cross-reference
    dictionary_entries: tuple[DictionaryEntry | None, ...] = ()
    api_base_url: str = DEFAULT_API_BASE_URL

    @classmethod
    def decode(
        cls,
        raw_payload: bytes | str,
        queried_word: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
    ) -> LookupResult:
        """Decode a raw API payload (see decode_lookup_result)."""
        return decode_lookup_result(raw_payload, queried_word, api_base_url)

    @property
    def has_translations(self) -> bool:
        """Check if the EC block produced pronunciations and glosses."""
        return self.pronunciations is not None

    @property
    def has_level_tags(self) -> bool:
        """Check if the word carries exam level tags."""
        return len(self.exam_tags) > 0

    @property
    def has_dictionary_entries(self) -> bool:
        """Check if the Collins block produced any entries."""
        return len(self.dictionary_entries) > 0

    @property
    def is_invalid(self) -> bool:
        """Check if the lookup carries no useful information."""
        return not self.has_translations and not self.has_dictionary_entries

    def audio_link(self, direction: AudioDirection = AudioDirection.US) -> str:
        """Build the pronunciation audio URL for an accent.

        Falls back to a link synthesized from the queried word (``type=2``)
        when the EC block is absent or carries no speech reference.
        """
        prefix = f"{self.api_base_url}/dictvoice?audio="
        ref = self.pronunciations.audio_ref(direction) if self.pronunciations else ""
        if not ref:
            return f"{prefix}{self.queried_word}&type=2"
        return f"{prefix}{ref}"

    def __str__(self) -> str:
        return (
            f"LookupResult(word='{self.queried_word}', "
            f"glosses={len(self.gloss_entries)}, entries={len(self.dictionary_entries)})"
        )


def decode_lookup_result(
    raw_payload: bytes | str,
    queried_word: str,
    api_base_url: str = DEFAULT_API_BASE_URL,
) -> LookupResult:
    """Decode a Youdao ``jsonapi`` payload into a LookupResult.

    Absent blocks decode to their empty state; values of the wrong JSON type
    raise. Validity is not checked here, callers use ``is_invalid``.

    Args:
        raw_payload: Raw JSON response body
        queried_word: The word exactly as the user typed it
        api_base_url: Base URL used when building audio links

    Returns:
        Immutable LookupResult

    Raises:
        DecodeError: If the payload is not structurally valid
    """
    root = PayloadNode.parse(raw_payload)

    ec = root.object("ec")
    exam_tags = tuple(ec.strings("exam_type"))

    pronunciations = None
    gloss_entries: list[str] = []
    ec_words = ec.array("word")
    if ec_words:
        ec_word = ec_words[0]
        pronunciations = Pronunciations(
            uk_phonetic=ec_word.string("ukphone"),
            us_phonetic=ec_word.string("usphone"),
            uk_audio_ref=ec_word.string("ukspeech"),
            us_audio_ref=ec_word.string("usspeech"),
        )
        for group in ec_word.array("trs"):
            senses = group.first("tr").object("l").strings("i")
            if senses:
                gloss_entries.append(senses[0])

    collins_entries = root.object("collins").array("collins_entries")
    dictionary_entries: tuple[DictionaryEntry | None, ...] = ()
    if collins_entries:
        raw_entries = collins_entries[0].object("entries").array("entry")
        dictionary_entries = tuple(classify_entry(entry) for entry in raw_entries)

    return LookupResult(
        queried_word=queried_word,
        exam_tags=exam_tags,
        pronunciations=pronunciations,
        gloss_entries=tuple(gloss_entries),
        dictionary_entries=dictionary_entries,
        api_base_url=api_base_url.rstrip("/"),
    )
