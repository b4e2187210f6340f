"""Tests for configuration validation"""
import pytest
from pathlib import Path

from taskquest import config
from taskquest.exceptions import ConfigurationError


class TestConfigValidation:
    """Test configuration validation"""

    def test_defaults_are_valid(self, monkeypatch):
        """Test the default configuration passes validation"""
        monkeypatch.setattr(config, "STORE_BACKEND", "json")
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")

        config.validate_config()

    def test_unknown_store_backend(self, monkeypatch):
        """Test unknown STORE_BACKEND raises ConfigurationError"""
        monkeypatch.setattr(config, "STORE_BACKEND", "redis")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "STORE_BACKEND"

    def test_unknown_timezone(self, monkeypatch):
        monkeypatch.setattr(config, "STORE_BACKEND", "memory")
        monkeypatch.setattr(config, "TIMEZONE", "Mars/Olympus_Mons")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "TIMEZONE"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setattr(config, "STORE_BACKEND", "memory")
        monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "LOG_LEVEL"

    def test_lowercase_log_level_accepted(self, monkeypatch):
        monkeypatch.setattr(config, "STORE_BACKEND", "memory")
        monkeypatch.setattr(config, "LOG_LEVEL", "debug")

        config.validate_config()

    def test_store_path(self, monkeypatch):
        monkeypatch.setattr(config, "DATA_PATH", Path("/tmp/tq"))
        monkeypatch.setattr(config, "STORE_FILENAME", "x.json")

        assert config.store_path() == Path("/tmp/tq/x.json")
