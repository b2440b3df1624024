"""CLI command for validating Anki and audio setup."""

from ydict.config import load_config_from_env
from ydict.presenters import ConsolePresenter
from ydict.services import ValidationService


def check_command(args) -> int:
    """Execute the check subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = all checks passed, 1 = failure)
    """
    config = load_config_from_env()
    presenter = ConsolePresenter()

    presenter.show_info(f"Checking AnkiConnect at {config.ankiconnect_url}...")
    result = ValidationService(config).validate_setup()
    presenter.show_validation_result(result)

    return 0 if result.all_passed else 1
