"""Tests for environment-driven settings."""

from pathlib import Path

from bgin_server.config import Settings


def test_defaults(monkeypatch):
    for name in ["PORT", "OPENAI_API_KEY", "DISCOURSE_API_KEY", "CHAT_STORAGE_DIR", "BGIN_CORS_ALLOW_ORIGINS"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.app_name == "BGIN Multi-Agent Hub"
    assert settings.server_port == 4000
    assert settings.llm_temperature == 0.7
    assert settings.llm_max_tokens == 1000
    assert settings.chat_storage_dir == Path("chat-storage")
    assert settings.cors_allow_origins == ["*"]
    assert not settings.openai_configured
    assert not settings.discourse_configured


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "5050")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
    monkeypatch.setenv("OLLAMA_MODEL", "mistral")
    monkeypatch.setenv("BGIN_CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")

    settings = Settings()

    assert settings.server_port == 5050
    assert settings.openai_configured
    assert settings.ollama_model == "mistral"
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]


def test_bad_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("LLM_TEMPERATURE", "warm")

    settings = Settings()

    assert settings.server_port == 4000
    assert settings.llm_temperature == 0.7


def test_empty_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("DISCOURSE_API_KEY", "")

    assert Settings().discourse_api_key is None


def test_docs_can_be_disabled(monkeypatch):
    monkeypatch.setenv("BGIN_ENABLE_DOCS", "0")

    assert Settings().resolved_docs_url is None
