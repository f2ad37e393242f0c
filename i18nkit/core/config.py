"""Engine configuration via Pydantic Settings.

Reads environment variables (and optional .env file) and validates them
at startup. Use ``get_settings()`` to obtain a cached singleton.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from i18nkit.storage.base import StorageType


class Settings(BaseSettings):
    """Validated i18n settings sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Languages -------------------------------------------------------
    I18N_DEFAULT_LANGUAGE: str = "en"
    I18N_LOCALES_DIR: str = ""  # empty = translations supplied by the host

    # --- Persistence -----------------------------------------------------
    I18N_STORAGE_TYPE: StorageType = StorageType.LOCAL
    I18N_STORAGE_NAME: str = "i18nrs"
    I18N_DATABASE_URL: str = "sqlite:///i18n.db"

    # --- Logging ---------------------------------------------------------
    LOG_LEVEL: str = "INFO"

    # --- Validators ------------------------------------------------------
    @field_validator("I18N_DEFAULT_LANGUAGE", "I18N_STORAGE_NAME")
    @classmethod
    def _validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @model_validator(mode="after")
    def _validate_database_for_local(self) -> Settings:
        """Durable storage needs somewhere to write."""
        if self.I18N_STORAGE_TYPE is StorageType.LOCAL and not self.I18N_DATABASE_URL:
            raise ValueError("I18N_DATABASE_URL is required when I18N_STORAGE_TYPE is 'local'")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    return Settings()
