import dataclasses

import pytest

from backend.gateway.config import (
    ConfigError, DEFAULT_MODEL, DEFAULT_PORT, DEFAULT_STATIC_DIR, ServerConfig, load_config
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    # Ignore any .env file on the machine running the tests
    mocker.patch("backend.gateway.config.load_dotenv")
    for name in ("GEMINI_API_KEY", "PORT", "GEMINI_MODEL", "STATIC_DIR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()
    assert config.gemini_api_key is None
    assert not config.has_key
    assert config.port == DEFAULT_PORT == 3000
    assert config.gemini_model == DEFAULT_MODEL
    assert config.static_dir == DEFAULT_STATIC_DIR
    assert config.temperature == 0.4
    assert config.max_output_tokens == 1024
    assert config.max_content_length == 20 * 1024 * 1024


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc123")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
    monkeypatch.setenv("STATIC_DIR", "/srv/ayurscan")

    config = load_config()
    assert config.gemini_api_key == "abc123"
    assert config.has_key
    assert config.port == 8080
    assert config.gemini_model == "gemini-2.5-flash"
    assert config.static_dir == "/srv/ayurscan"


def test_empty_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    assert load_config().gemini_api_key is None


@pytest.mark.parametrize("port", ["abc", "3000.5", "0", "70000"])
def test_invalid_port(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ConfigError):
        load_config()


def test_config_is_immutable():
    config = ServerConfig(gemini_api_key="abc123")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.gemini_api_key = "other"
