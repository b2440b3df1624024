"""Service for rendering lookup results as terminal text and flashcard HTML."""

import logging
from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, StrictUndefined, Template, TemplateError

from ydict.exceptions import TemplateRenderError
from ydict.models import CrossReference, Definition, LookupResult

logger = logging.getLogger(__name__)

INVALID_WORD_MESSAGE = "may be invalid word"
DICTIONARY_TITLE = "柯林斯权威释义：\n\n"
FLASHCARD_TEMPLATE_NAME = "flashcard_back.html.j2"


@dataclass(frozen=True)
class EntryView:
    """Display strings for one numbered dictionary entry."""

    paraphrase: str = ""
    english_example: str = ""
    chinese_example: str = ""
    see_also: str = ""

    @property
    def has_see_also(self) -> bool:
        return bool(self.see_also)


class PresentationService:
    """Render LookupResults into a plain-text report and a flashcard back (stateless service)."""

    def __init__(self, template_source: str | None = None):
        """Initialize the presentation service.

        Args:
            template_source: Optional Jinja2 source replacing the packaged
                flashcard template
        """
        self._template_source = template_source
        self._env = Environment(
            loader=PackageLoader("ydict", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # ------------------------------------------------------------------
    # Derived strings
    # ------------------------------------------------------------------

    @staticmethod
    def front_label(result: LookupResult) -> str:
        """Get the flashcard question side (the queried word, verbatim)."""
        return result.queried_word

    @staticmethod
    def phonetic_line(result: LookupResult) -> str:
        if not result.has_translations:
            return ""
        p = result.pronunciations
        return f"英音： [{p.uk_phonetic}] \t美音： [{p.us_phonetic}]"

    @staticmethod
    def level_line(result: LookupResult) -> str:
        if not result.has_level_tags:
            return ""
        return "Level：" + "".join(f"{tag}  " for tag in result.exam_tags)

    @staticmethod
    def gloss_line(result: LookupResult) -> str:
        if not result.has_translations:
            return ""
        return "".join(f"{gloss}\t" for gloss in result.gloss_entries)

    @staticmethod
    def dictionary_title(result: LookupResult) -> str:
        return DICTIONARY_TITLE if result.has_dictionary_entries else ""

    @staticmethod
    def entry_views(result: LookupResult) -> list[EntryView]:
        """Build display strings for every dictionary entry position.

        Positions whose raw entry was unclassifiable get an empty view so
        numbering stays aligned with the source.
        """
        views = []
        for i, entry in enumerate(result.dictionary_entries, 1):
            if isinstance(entry, Definition):
                views.append(
                    EntryView(
                        paraphrase=(
                            f"{i}. {entry.part_of_speech} {entry.pos_qualifier} "
                            f"{entry.translation}\n"
                        ),
                        english_example=f"例：{entry.example_english}\n",
                        chinese_example=f"{entry.example_chinese}\n\n",
                    )
                )
            elif isinstance(entry, CrossReference):
                views.append(EntryView(see_also=f"{i}. See also：{entry.target_word}\n\n"))
            else:
                views.append(EntryView())
        return views

    # ------------------------------------------------------------------
    # Terminal report
    # ------------------------------------------------------------------

    def dictionary_text(self, result: LookupResult) -> str:
        """Render the Collins section of the terminal report."""
        if not result.has_dictionary_entries:
            return ""

        parts = [self.dictionary_title(result)]
        for view in self.entry_views(result):
            if view.has_see_also:
                parts.append(view.see_also)
            else:
                parts.extend([view.paraphrase, view.english_example, view.chinese_example])
            # Emitted for every position, including empty views
            parts.append("\n")
        return "".join(parts)

    def render_report(self, result: LookupResult) -> str:
        """Render the terminal report.

        Layout::

            word

            phonetic <tab> level
            glosses


            柯林斯权威释义：

            1. ...

        Args:
            result: Decoded lookup

        Returns:
            Report text, or the fixed invalid-word message
        """
        if result.is_invalid:
            return INVALID_WORD_MESSAGE

        parts = [result.queried_word, "\n\n"]

        if result.has_translations:
            parts.extend(
                [
                    self.phonetic_line(result),
                    "\t",
                    self.level_line(result),
                    "\n",
                    self.gloss_line(result),
                ]
            )

        if result.has_dictionary_entries:
            parts.append("\n\n")
            parts.append(self.dictionary_text(result))

        return "".join(parts)

    # ------------------------------------------------------------------
    # Flashcard back
    # ------------------------------------------------------------------

    def _get_template(self) -> Template:
        if self._template_source is not None:
            return self._env.from_string(self._template_source)
        return self._env.get_template(FLASHCARD_TEMPLATE_NAME)

    def _render_template(self, result: LookupResult) -> str:
        """Render the flashcard template.

        Raises:
            TemplateRenderError: If the template cannot be loaded, compiled or rendered
        """
        try:
            template = self._get_template()
            return template.render(
                phonetic=self.phonetic_line(result),
                level=self.level_line(result),
                gloss=self.gloss_line(result),
                dictionary_title=self.dictionary_title(result),
                entries=self.entry_views(result),
            )
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render flashcard template: {e}") from e

    def render_flashcard_back(self, result: LookupResult) -> str:
        """Render the HTML answer side of a flashcard.

        Args:
            result: Decoded lookup

        Returns:
            HTML fragment, or "" for invalid lookups and template failures
        """
        if result.is_invalid:
            return ""

        try:
            return self._render_template(result)
        except TemplateRenderError as e:
            logger.error(str(e))
            return ""
