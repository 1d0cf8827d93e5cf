"""Tests for environment and JSON configuration."""
import json

import pytest

from words_statistics.config import DEFAULT_PORT, load_settings, read_config

ENV_VARS = [
    "WORDS_STATISTICS_HOST",
    "WORDS_STATISTICS_PORT",
    "WORDS_STATISTICS_LOG_LEVEL",
    "WORDS_STATISTICS_URL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT
    assert settings.log_level == "INFO"
    assert settings.service_url == "http://localhost:8000"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WORDS_STATISTICS_HOST", "127.0.0.1")
    monkeypatch.setenv("WORDS_STATISTICS_PORT", "9001")
    monkeypatch.setenv("WORDS_STATISTICS_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.host == "127.0.0.1"
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_invalid_port(monkeypatch, port):
    monkeypatch.setenv("WORDS_STATISTICS_PORT", port)
    with pytest.raises(ValueError):
        load_settings()


def test_read_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"service_url": "http://remote:9000"}))
    assert read_config(str(path)) == {"service_url": "http://remote:9000"}


def test_read_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(str(tmp_path / "missing.json"))


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("WORDS_STATISTICS_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="WORDS_STATISTICS_LOG_LEVEL"):
        load_settings()
