"""Application-wide configuration (pydantic-settings singleton)."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from error_translator.domain.errors import ConfigurationError


class Settings(BaseSettings):
    """Typed, validated settings loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────
    app_name: str = "Quipay Error Translator"
    environment: Literal["development", "test", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # ── Server ───────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ── Presentation ─────────────────────────────
    # Unset means "follow debug / environment".
    expose_technical_details: Optional[bool] = None

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper().strip()

    # ── Derived helpers ──────────────────────────

    @property
    def show_technical_details(self) -> bool:
        """Whether raw diagnostics may be sent to clients."""
        if self.expose_technical_details is not None:
            return self.expose_technical_details
        return self.debug or self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide singleton settings."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc


def reset_settings() -> None:
    """Clear the singleton (for testing)."""
    get_settings.cache_clear()
