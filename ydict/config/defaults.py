"""Default configuration values for ydict."""

import os
from collections.abc import Mapping

from .config import YDictConfig

DECK_NAME_ENV_VAR = "ANKI_DECK_NAME"


def create_default_config(**overrides) -> YDictConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        YDictConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            anki_deck_name="English",
            translate_timeout=5.0,
        )
    """
    return YDictConfig(**overrides)


def load_config_from_env(environ: Mapping[str, str] | None = None, **overrides) -> YDictConfig:
    """Create a configuration, taking the Anki deck name from the environment.

    Args:
        environ: Environment mapping to read (defaults to os.environ)
        **overrides: Keyword arguments to override values; an explicit
            anki_deck_name wins over the environment

    Returns:
        YDictConfig with the deck name resolved
    """
    env = os.environ if environ is None else environ
    overrides.setdefault("anki_deck_name", env.get(DECK_NAME_ENV_VAR, ""))
    return create_default_config(**overrides)
