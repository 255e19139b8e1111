"""
Application settings management using Pydantic.

This module combines YAML configuration with environment variables to create
a unified settings object.
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from presenter_hub.config.loader import load_config, load_prompts, merge_with_env
from presenter_hub.utils.error_handling import ConfigurationError


class LLMSettings(BaseModel):
    """Language model settings used by the generation proxy."""

    model: str = "gemini-1.5-flash"
    temperature: float = 0.7
    max_output_tokens: int = 2048
    timeout: int = 60

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("Temperature must be between 0.0 and 2.0")
        return v

    @field_validator("max_output_tokens")
    @classmethod
    def validate_max_output_tokens(cls, v: int) -> int:
        if v < 1 or v > 32000:
            raise ValueError("max_output_tokens must be between 1 and 32000")
        return v


class ProxySettings(BaseModel):
    """Where clients reach the generation proxy."""

    base_url: str = "http://localhost:5000"
    timeout: float = 120.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            raise ValueError("base_url must start with https:// or http://")
        return v.rstrip("/")


class APISettings(BaseModel):
    """API configuration settings."""

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


class StorageSettings(BaseModel):
    """Saved deck collection location."""

    path: str = "data/presentations.json"
    key: str = "saved_presentations"


class ExportSettings(BaseModel):
    """Export output settings."""

    output_dir: str = "exports"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "text"
    log_file: Optional[str] = "logs/app.log"
    max_file_size_mb: int = 10
    backup_count: int = 5

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Combines environment variables (for secrets) with YAML configuration
    (for application settings).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # Secret from environment; requests may also carry their own key
    gemini_api_key: Optional[str] = Field(None, description="Default Gemini API key")

    llm: LLMSettings = Field(default_factory=LLMSettings)
    proxy: ProxySettings = Field(default_factory=ProxySettings)
    api: APISettings = Field(default_factory=APISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    prompts: dict[str, Any] = Field(default_factory=dict)

    environment: str = "development"


def create_settings() -> AppSettings:
    """
    Create application settings by combining YAML config and environment variables.

    Returns:
        AppSettings instance with all configuration loaded

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    try:
        config = merge_with_env(load_config())
        prompts = load_prompts()

        return AppSettings(
            llm=LLMSettings(**config["llm"]),
            proxy=ProxySettings(**config["proxy"]),
            api=APISettings(**config["api"]),
            storage=StorageSettings(**config["storage"]),
            export=ExportSettings(**config.get("export", {})),
            logging=LoggingSettings(**config["logging"]),
            prompts=prompts,
            environment=config.get("environment", "development"),
        )

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to create settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Get the application settings singleton.

    This function is cached, so subsequent calls return the same instance.
    Use reload_settings() to force a reload during development.

    Returns:
        Cached AppSettings instance
    """
    return create_settings()


def reload_settings() -> AppSettings:
    """
    Reload settings by clearing the cache and recreating.

    Returns:
        New AppSettings instance
    """
    get_settings.cache_clear()
    return get_settings()
