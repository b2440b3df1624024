"""CLI command for looking up a single word."""

from ydict.config import load_config_from_env
from ydict.exceptions import YDictException
from ydict.models import AudioDirection
from ydict.orchestration import LookupProcessor
from ydict.presenters import ConsolePresenter
from ydict.services import AnkiService, AudioService, PresentationService, TranslationService


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = load_config_from_env()
    presenter = ConsolePresenter()

    word = args.word
    if not word.strip():
        presenter.show_error("you must specify a word to translate")
        return 1

    processor = LookupProcessor(
        config=config,
        translator=TranslationService(config),
        presentation_service=PresentationService(),
        presenter=presenter,
        anki_service=AnkiService(config) if args.anki else None,
        audio_service=AudioService(config) if args.speak else None,
    )

    try:
        outcome = processor.process(
            word,
            add_to_anki=args.anki,
            speak=args.speak,
            allow_duplicate=args.allow_duplicate,
            accent=AudioDirection.UK if args.uk else AudioDirection.US,
        )
    except YDictException as e:
        presenter.show_error(str(e))
        return 1

    return 0 if outcome.success else 1
