from __future__ import annotations

from dataclasses import dataclass, field
import os

from dotenv import dotenv_values, find_dotenv

# Values read from the nearest .env file; never copied into os.environ.
_env_file: dict[str, str | None] = {}


def _load_env() -> None:
    global _env_file
    env_path = find_dotenv(usecwd=True)
    _env_file = dict(dotenv_values(env_path)) if env_path else {}


def _lookup(key: str) -> str | None:
    value = os.getenv(key)
    if value is None:
        value = _env_file.get(key)
    return value


def _get_env(key: str, default: str | None = None) -> str | None:
    value = _lookup(key)
    if value is None or value == "":
        return default
    return value


def _get_bool(key: str, default: bool = False) -> bool:
    value = _lookup(key)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    title: str = field(default_factory=lambda: _get_env("SWAGGER_UI_TITLE", "Swagger UI"))
    # Mount point of the static files, e.g. "/docs/static". Unset keeps the relative defaults.
    static_prefix: str | None = field(default_factory=lambda: _get_env("SWAGGER_UI_STATIC_PREFIX"))
    dom_id: str = field(default_factory=lambda: _get_env("SWAGGER_UI_DOM_ID", "#swagger-ui"))
    deep_linking: bool = field(default_factory=lambda: _get_bool("SWAGGER_UI_DEEP_LINKING", True))
    log_level: str = field(default_factory=lambda: _get_env("SWAGGER_UI_LOG_LEVEL", "WARNING"))


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _load_env()
        _settings = Settings()
    return _settings


def refresh_settings() -> Settings:
    """Rebuild settings from environment variables and the nearest .env file.

    Process environment variables take precedence over .env values.
    """
    global _settings
    _load_env()
    _settings = Settings()
    return _settings


__all__ = ["Settings", "get_settings", "refresh_settings"]
