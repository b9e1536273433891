"""Fallback store configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Invalid combinations (e.g. an empty data directory or a
token prefix containing the token delimiter) are rejected at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = "database/fallback-data"
DEFAULT_TOKEN_PREFIX = "fallback"


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    The remote URL is optional: when unset the application always runs in
    fallback mode against the local JSON store.
    """

    debug: bool = False

    # Local fallback store
    fallback_enabled: bool = True
    # Skip the connectivity probe and always use the local store.
    fallback_force: bool = False
    fallback_data_dir: str = DEFAULT_DATA_DIR
    fallback_token_prefix: str = DEFAULT_TOKEN_PREFIX

    # Hosted backend (probed before choosing a data mode)
    remote_url: str | None = None
    remote_connectivity_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_fallback(self) -> "Settings":
        """Validate data dir, token prefix and probe timeout."""
        if not self.fallback_data_dir.strip():
            raise ValueError("FALLBACK_DATA_DIR must not be empty.")
        if not self.fallback_token_prefix or "-" in self.fallback_token_prefix:
            raise ValueError(
                "FALLBACK_TOKEN_PREFIX must be non-empty and must not contain '-' "
                f"(the token delimiter), got: {self.fallback_token_prefix!r}"
            )
        if self.remote_connectivity_timeout_seconds <= 0:
            raise ValueError(
                "REMOTE_CONNECTIVITY_TIMEOUT_SECONDS must be positive, got: "
                f"{self.remote_connectivity_timeout_seconds!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
