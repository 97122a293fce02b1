# meeting_summarizer/core/config.py
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 3001
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_GROQ_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_CORS_ORIGINS = [
    "https://hasanhashmi1.github.io",
    "http://localhost:5173",
]


@dataclass(frozen=True)
class Settings:
    groq_api_key: str
    groq_model: str = DEFAULT_GROQ_MODEL
    groq_base_url: str = DEFAULT_GROQ_BASE_URL
    groq_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_allow_origins: Optional[List[str]] = None
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    log_level: str = "INFO"

    def __post_init__(self):
        if self.cors_allow_origins is None:
            object.__setattr__(self, "cors_allow_origins", list(DEFAULT_CORS_ORIGINS))


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _origins_env(name: str) -> Optional[List[str]]:
    raw = os.getenv(name)
    if not raw:
        return None
    return [o.strip() for o in raw.split(",") if o.strip()]


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if level not in LOG_LEVELS:
        raise RuntimeError(f"{name} must be one of {', '.join(LOG_LEVELS)}")
    return level


def load_settings() -> Settings:
    """Build settings from the process environment (and a local .env file)."""
    load_dotenv()

    groq_api_key = os.getenv("GROQ_API_KEY")
    if not groq_api_key:
        raise RuntimeError("GROQ_API_KEY is not defined in environment variables")

    return Settings(
        groq_api_key=groq_api_key,
        groq_model=os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL),
        groq_base_url=os.getenv("GROQ_BASE_URL", DEFAULT_GROQ_BASE_URL),
        groq_timeout_seconds=_float_env("GROQ_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", DEFAULT_PORT),
        cors_allow_origins=_origins_env("CORS_ALLOW_ORIGINS"),
        max_body_bytes=_int_env("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        log_level=_log_level_env("LOG_LEVEL", "INFO"),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
