"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = _project_root() / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


def resolve_config_path(raw_path: str) -> Path:
    """
    Resolve a config path relative to the project root unless already absolute.
    """

    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (_project_root() / candidate).resolve()


@dataclass(frozen=True)
class AppSettings:
    """
    HTTP process settings.
    """

    port: int = 3000
    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class CollectionSettings:
    """
    Runtime settings for template-driven collection.
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 15.0
    feed_item_limit: int = 10
    description_max_chars: int = 200
    intelligence_page_size: int = 20
    seed_template: str = "techcrunch_rss"
    lazy_seed: bool = True
    templates_config_path: str | None = None


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """
    Return cached HTTP process settings from environment variables.
    """

    raw_origins = _get_str_env("CORS_ALLOW_ORIGINS", "*")
    origins = tuple(item.strip() for item in raw_origins.split(",") if item.strip())
    return AppSettings(
        port=max(1, _get_int_env("PORT", 3000)),
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=origins or ("*",),
    )


@lru_cache(maxsize=1)
def get_collection_settings() -> CollectionSettings:
    """
    Return cached collection settings from environment variables.
    """

    templates_path = _get_optional_str_env("TEMPLATES_CONFIG_PATH")
    return CollectionSettings(
        user_agent=_get_str_env("COLLECT_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_seconds=max(1.0, _get_float_env("COLLECT_TIMEOUT_SECONDS", 15.0)),
        feed_item_limit=max(1, _get_int_env("COLLECT_FEED_ITEM_LIMIT", 10)),
        description_max_chars=max(1, _get_int_env("COLLECT_DESCRIPTION_MAX_CHARS", 200)),
        intelligence_page_size=max(1, _get_int_env("INTELLIGENCE_PAGE_SIZE", 20)),
        seed_template=_get_str_env("INTELLIGENCE_SEED_TEMPLATE", "techcrunch_rss"),
        lazy_seed=_get_bool_env("INTELLIGENCE_LAZY_SEED", True),
        templates_config_path=(
            str(resolve_config_path(templates_path)) if templates_path else None
        ),
    )
