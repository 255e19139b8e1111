"""
Unit tests for application settings.
"""

import pytest
import yaml
from pydantic import ValidationError

from presenter_hub.config.settings import (
    APISettings,
    LLMSettings,
    LoggingSettings,
    ProxySettings,
    create_settings,
    get_settings,
    reload_settings,
)
from presenter_hub.utils.error_handling import ConfigurationError


class TestLLMSettings:
    """Tests for LLMSettings validation."""

    def test_defaults(self):
        settings = LLMSettings()
        assert settings.model == "gemini-1.5-flash"
        assert settings.temperature == 0.7

    @pytest.mark.parametrize("temperature", [-0.1, 2.5])
    def test_invalid_temperature(self, temperature):
        with pytest.raises(ValidationError, match="Temperature"):
            LLMSettings(temperature=temperature)

    def test_invalid_max_output_tokens(self):
        with pytest.raises(ValidationError, match="max_output_tokens"):
            LLMSettings(max_output_tokens=0)


class TestProxySettings:
    """Tests for ProxySettings validation."""

    def test_trailing_slash_stripped(self):
        assert ProxySettings(base_url="http://proxy.test/").base_url == "http://proxy.test"

    def test_invalid_scheme(self):
        with pytest.raises(ValidationError, match="base_url"):
            ProxySettings(base_url="proxy.test")


class TestAPISettings:
    """Tests for APISettings validation."""

    def test_invalid_port(self):
        with pytest.raises(ValidationError, match="Port"):
            APISettings(port=70000)


class TestLoggingSettings:
    """Tests for LoggingSettings validation."""

    def test_level_uppercased(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError, match="Log level"):
            LoggingSettings(level="LOUD")

    def test_invalid_format(self):
        with pytest.raises(ValidationError, match="Log format"):
            LoggingSettings(format="xml")


class TestCreateSettings:
    """Tests for building AppSettings from YAML and environment."""

    def test_create_settings(self, config_dir, sample_config, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")

        settings = create_settings()

        assert settings.llm.model == "gemini-test"
        assert settings.proxy.base_url == "http://proxy.test"
        assert settings.storage.path == sample_config["storage"]["path"]
        assert settings.export.output_dir == sample_config["export"]["output_dir"]
        assert settings.logging.log_file is None
        assert settings.environment == "test"
        assert settings.gemini_api_key == "env-key"
        assert set(settings.prompts) == {"slide_by_slide", "outline"}

    def test_env_override_applied(self, config_dir, monkeypatch):
        monkeypatch.setenv("STORAGE_PATH", "/tmp/other.json")

        assert create_settings().storage.path == "/tmp/other.json"

    def test_invalid_values_wrapped(self, config_dir, sample_config):
        sample_config["api"]["port"] = 0
        with open(config_dir / "config.yaml", "w") as f:
            yaml.dump(sample_config, f)

        with pytest.raises(ConfigurationError, match="Failed to create settings"):
            create_settings()

    def test_missing_file_propagates(self, config_dir):
        (config_dir / "prompts.yaml").unlink()

        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            create_settings()


class TestSettingsCache:
    """Tests for the cached settings accessor."""

    def test_get_settings_cached(self, config_dir):
        assert get_settings() is get_settings()

    def test_reload_settings(self, config_dir, sample_config):
        first = get_settings()
        sample_config["environment"] = "staging"
        with open(config_dir / "config.yaml", "w") as f:
            yaml.dump(sample_config, f)

        second = reload_settings()

        assert second is not first
        assert second.environment == "staging"
