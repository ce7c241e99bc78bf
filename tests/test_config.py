"""Tests for configuration module."""

import json
from pathlib import Path

import pytest

from schema_oapi.config import Config


def test_config_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("SCHEMA_OAPI_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMA_OAPI_LOGGING__FORMAT", "console")
    monkeypatch.setenv("SCHEMA_OAPI_CONVERTER__CACHE_ENABLED", "false")

    config = Config()

    assert config.logging.level == "DEBUG"
    assert config.logging.format == "console"
    assert config.converter.cache_enabled is False
    assert config.converter.log_diagnostics is True

def test_config_defaults():
    """Test default configuration values."""
    config = Config()

    assert config.logging.level == "INFO"
    assert config.logging.format == "json"
    assert config.logging.file is None

    assert config.converter.cache_enabled is True
    assert config.converter.log_diagnostics is True


def test_config_from_file(tmp_path: Path):
    """Test loading configuration from a JSON file."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "logging": {"level": "WARNING"},
        "converter": {"cache_enabled": False, "log_diagnostics": False},
    }))

    config = Config.from_file(config_file)

    assert config.logging.level == "WARNING"
    assert config.logging.format == "json"
    assert config.converter.cache_enabled is False
    assert config.converter.log_diagnostics is False


def test_config_from_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        Config.from_file(tmp_path / "missing.json")
