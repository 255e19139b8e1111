"""
Configuration loader for YAML files.

This module handles loading and parsing YAML configuration files.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from presenter_hub.utils.error_handling import ConfigurationError

CONFIG_DIR_ENV = "PRESENTER_HUB_CONFIG_DIR"


def get_config_dir() -> Path:
    """
    Get the directory holding config.yaml and prompts.yaml.

    Uses PRESENTER_HUB_CONFIG_DIR when set, otherwise the ``config``
    directory at the project root.
    """
    if override := os.getenv(CONFIG_DIR_ENV):
        return Path(override)
    # Project root is the parent of the presenter_hub package
    return Path(__file__).resolve().parent.parent.parent / "config"


def get_config_path(filename: str) -> Path:
    """
    Get the path to a configuration file.

    Args:
        filename: Name of the config file (e.g., 'config.yaml')

    Returns:
        Path to the configuration file

    Raises:
        ConfigurationError: If config file doesn't exist
    """
    config_path = get_config_dir() / filename

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    return config_path


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Load and parse a YAML file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML content as a dictionary

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            raise ConfigurationError(f"YAML file is empty: {file_path}")

        if not isinstance(content, dict):
            raise ConfigurationError(
                f"YAML file must contain a dictionary at root level: {file_path}"
            )

        return content

    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e


def load_config() -> dict[str, Any]:
    """
    Load the main configuration file (config.yaml).

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If config cannot be loaded
    """
    config = load_yaml_file(get_config_path("config.yaml"))

    required_keys = ["llm", "proxy", "api", "storage", "logging"]
    missing_keys = [key for key in required_keys if key not in config]

    if missing_keys:
        raise ConfigurationError(
            f"Missing required configuration sections: {', '.join(missing_keys)}"
        )

    return config


def load_prompts() -> dict[str, Any]:
    """
    Load the prompts configuration file (prompts.yaml).

    Returns:
        Prompts dictionary

    Raises:
        ConfigurationError: If prompts cannot be loaded
    """
    prompts = load_yaml_file(get_config_path("prompts.yaml"))

    required_prompts = ["slide_by_slide", "outline"]
    missing_prompts = [key for key in required_prompts if key not in prompts]

    if missing_prompts:
        raise ConfigurationError(
            f"Missing required prompts: {', '.join(missing_prompts)}"
        )

    return prompts


def merge_with_env(config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge configuration with environment variable overrides.

    Environment variables can override specific config values:
    - API_PORT -> api.port
    - LOG_LEVEL -> logging.level
    - PROXY_BASE_URL -> proxy.base_url
    - STORAGE_PATH -> storage.path
    - ENVIRONMENT -> environment

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment overrides applied
    """
    merged = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in config.items()
    }

    if port := os.getenv("API_PORT"):
        try:
            merged["api"]["port"] = int(port)
        except (ValueError, KeyError):
            pass

    if log_level := os.getenv("LOG_LEVEL"):
        if "logging" in merged:
            merged["logging"]["level"] = log_level.upper()

    if base_url := os.getenv("PROXY_BASE_URL"):
        merged.setdefault("proxy", {})["base_url"] = base_url

    if storage_path := os.getenv("STORAGE_PATH"):
        merged.setdefault("storage", {})["path"] = storage_path

    if environment := os.getenv("ENVIRONMENT"):
        merged["environment"] = environment

    return merged


def reload_config() -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Reload both configuration and prompts files.

    Returns:
        Tuple of (config, prompts) dictionaries

    Raises:
        ConfigurationError: If either file cannot be loaded
    """
    config = load_config()
    prompts = load_prompts()
    config = merge_with_env(config)

    return config, prompts
