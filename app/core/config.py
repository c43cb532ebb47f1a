from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
)
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
_TRUTHY = {"1", "true", "yes", "y", "on"}


def _get_env(name: str, default: str | None = None) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or default


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name)
    return default if raw is None else raw.lower() in _TRUTHY


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    items = tuple(item.strip() for item in (_get_env(name) or "").split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    sentry_dsn: str | None
    # slowapi limit strings, e.g. "60/minute"
    rate_limit_enabled: bool
    rate_limit: str
    upload_rate_limit: str
    llm_rate_limit: str
    max_upload_bytes: int
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool


settings = Settings(
    app_name=_get_env("APP_NAME", "Career Tools API"),
    log_level=_get_env("LOG_LEVEL", "INFO").upper(),
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    rate_limit=_get_env("RATE_LIMIT", "60/minute"),
    upload_rate_limit=_get_env("UPLOAD_RATE_LIMIT", "20/minute"),
    llm_rate_limit=_get_env("LLM_RATE_LIMIT", "10/minute"),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
    cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
)

if settings.max_upload_bytes <= 0:
    raise RuntimeError("MAX_UPLOAD_BYTES must be a positive number of bytes.")
