"""
Runtime settings for the TKB backend.

Everything comes from the environment (a local .env file is loaded first),
so the Gemini API key never lives in source.
"""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv

from tkb.errors import ConfigError

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash-lite"
STRIP_MODES = ("boundary", "remove")


@dataclass(frozen=True)
class Settings:
    api_key: str
    endpoint: str
    model: str = DEFAULT_MODEL
    request_timeout: float = 20.0
    strip_mode: str = "boundary"
    retry_after: int = 30
    cors_origins: Tuple[str, ...] = ("http://localhost:5173",)
    log_level: str = "INFO"


def _number(name, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"❌ {name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"❌ {name} must be positive, got {raw!r}")
    return value


def load_settings() -> Settings:
    load_dotenv()

    api_key = os.environ.get("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("❌ GEMINI_API_KEY environment variable not set")

    model = os.environ.get("GEMINI_MODEL", DEFAULT_MODEL).strip()
    base_url = os.environ.get("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
    endpoint = os.environ.get("GEMINI_ENDPOINT") or f"{base_url}/models/{model}:generateContent"

    strip_mode = os.environ.get("TKB_STRIP_MODE", "boundary").strip().lower()
    if strip_mode not in STRIP_MODES:
        raise ConfigError(f"❌ TKB_STRIP_MODE must be one of {STRIP_MODES}, got {strip_mode!r}")

    log_level = os.environ.get("TKB_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"❌ TKB_LOG_LEVEL is not a logging level name, got {log_level!r}")

    origins = os.environ.get("TKB_CORS_ORIGINS", "http://localhost:5173")

    return Settings(
        api_key=api_key,
        endpoint=endpoint,
        model=model,
        request_timeout=_number("TKB_REQUEST_TIMEOUT", 20.0, float),
        strip_mode=strip_mode,
        retry_after=_number("TKB_RETRY_AFTER", 30, int),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=log_level,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
