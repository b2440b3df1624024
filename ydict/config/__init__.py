"""Configuration management for ydict."""

from .config import YDictConfig
from .defaults import DECK_NAME_ENV_VAR, create_default_config, load_config_from_env

__all__ = ["YDictConfig", "DECK_NAME_ENV_VAR", "create_default_config", "load_config_from_env"]
