"""Main CLI entry point for ydict."""

import argparse
import logging
import sys

from ydict import __version__
from ydict.cli.commands import check, lookup


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="yd",
        description="Look up English words in the Youdao dictionary",
        epilog="Use 'yd <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # yd lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Translate a word",
        description="Print phonetics, translations and Collins entries for a word",
    )
    lookup_parser.add_argument("word", help="The word to translate")
    lookup_parser.add_argument(
        "-a",
        "--anki",
        action="store_true",
        help="Add the result to Anki (deck taken from ANKI_DECK_NAME)",
    )
    lookup_parser.add_argument(
        "-s",
        "--speak",
        action="store_true",
        help="Play the pronunciation",
    )
    lookup_parser.add_argument(
        "--uk",
        action="store_true",
        help="Play the British pronunciation instead of the American one",
    )
    lookup_parser.add_argument(
        "--allow-duplicate",
        action="store_true",
        help="Let Anki accept a note that already exists",
    )

    # yd check
    subparsers.add_parser(
        "check",
        help="Validate Anki and audio setup",
        description="Check AnkiConnect, the configured deck and ffmpeg",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "check":
        return check.check_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
