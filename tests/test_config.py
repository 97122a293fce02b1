import pytest

from meeting_summarizer.core import config
from meeting_summarizer.core.config import DEFAULT_CORS_ORIGINS, Settings, load_settings

ENV_VARS = [
    "GROQ_API_KEY", "GROQ_MODEL", "GROQ_BASE_URL", "GROQ_TIMEOUT_SECONDS", "HOST",
    "PORT", "CORS_ALLOW_ORIGINS", "MAX_BODY_BYTES", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_missing_api_key_is_fatal():
    with pytest.raises(RuntimeError, match="GROQ_API_KEY"):
        load_settings()


def test_defaults(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    settings = load_settings()
    assert settings.groq_api_key == "gsk_test"
    assert settings.port == 3001
    assert settings.groq_model == "llama-3.3-70b-versatile"
    assert settings.groq_base_url == "https://api.groq.com/openai/v1"
    assert settings.groq_timeout_seconds == 60.0
    assert settings.max_body_bytes == 10 * 1024 * 1024
    assert settings.cors_allow_origins == DEFAULT_CORS_ORIGINS


def test_overrides(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GROQ_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")
    settings = load_settings()
    assert settings.port == 8080
    assert settings.groq_timeout_seconds == 12.5
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_bad_port(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(RuntimeError, match="PORT must be an integer"):
        load_settings()


def test_settings_default_origins_are_copied():
    first = Settings(groq_api_key="k")
    first.cors_allow_origins.append("https://other.example")
    assert Settings(groq_api_key="k").cors_allow_origins == DEFAULT_CORS_ORIGINS


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(RuntimeError, match="LOG_LEVEL must be one of"):
        load_settings()
