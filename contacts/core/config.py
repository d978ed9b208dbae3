"""
Configuration helpers for the contacts package.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

IDENTITY_POLICIES = ("full", "name")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    database_url: str
    identity_policy: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: tuple[str, ...], default: str) -> str:
        candidate = (value or "").strip().lower()
        return candidate if candidate in allowed else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("CONTACTS_DATA_FILE", "data/contacts.json"),
        database_url=os.getenv("DATABASE_URL", ""),
        identity_policy=_choice(os.getenv("CONTACTS_IDENTITY_POLICY"), IDENTITY_POLICIES, "full"),
        log_level=(os.getenv("CONTACTS_LOG_LEVEL") or "INFO").upper(),
    )
