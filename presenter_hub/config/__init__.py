"""Configuration loading and settings."""

from presenter_hub.config.loader import (
    get_config_path,
    load_config,
    load_prompts,
    merge_with_env,
    reload_config,
)
from presenter_hub.config.settings import AppSettings, create_settings, get_settings, reload_settings

__all__ = [
    # Loader
    "get_config_path",
    "load_config",
    "load_prompts",
    "merge_with_env",
    "reload_config",
    # Settings
    "AppSettings",
    "create_settings",
    "get_settings",
    "reload_settings",
]
