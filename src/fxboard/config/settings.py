# src/fxboard/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file, with defaults
that reach the public HG Brasil finance endpoint.

Files that USE this module:
- fxboard.app (loads settings for logging, client and locale configuration)
- fxboard.adapters.providers.hgbrasil (default base URL, API key and timeout)
- fxboard.adapters.formatting.formatter (default locale, currency symbol, NA marker)

Files that this module USES:
- fxboard.shared.validators (validation functions for settings)
- fxboard.shared.locale (supported display locales)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxboard.shared.locale import SUPPORTED_LOCALES  # Locales with known separators
from fxboard.shared.validators import (
    validate_api_key,  # Validate API key format
    validate_base_url,  # Validate endpoint URL format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Finance API ---
    finance_base_url: str = Field(default="https://api.hgbrasil.com/finance", alias="FINANCE_BASE_URL")
    finance_api_key: str = Field(default="d79425ba", alias="FINANCE_API_KEY")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Display ---
    display_locale: str = Field(default="pt_BR", alias="DISPLAY_LOCALE")
    currency_symbol: str = Field(default="R$", alias="CURRENCY_SYMBOL", min_length=1)
    na_marker: str = Field(default="N/A", alias="NA_MARKER", min_length=1)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXBOARD_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("finance_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate endpoint URL format."""
        if not validate_base_url(v):
            raise ValueError("FINANCE_BASE_URL must be an absolute http(s) URL")
        return v.rstrip("/")

    @field_validator("finance_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format."""
        if not validate_api_key(v):
            raise ValueError("Invalid FINANCE_API_KEY format")
        return v

    @field_validator("display_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate display locale."""
        v = v.replace("-", "_")
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"DISPLAY_LOCALE must be one of {', '.join(SUPPORTED_LOCALES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


# Global settings instance
settings = Settings()
