"""
Process-wide configuration using Pydantic Settings.

Values come from environment variables and an optional .env file in the
working directory. Blank variables fall back to the defaults.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_SCHEMA_VARIANT = "sales_proposal"


class Settings(BaseSettings):
    """Read-only settings shared by every request."""

    # OpenAI
    openai_model: str = DEFAULT_MODEL
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None

    # Extraction
    default_schema: str = Field(
        default=DEFAULT_SCHEMA_VARIANT,
        validation_alias=AliasChoices("DEFAULT_SCHEMA_VARIANT", "default_schema"),
    )
    fetch_timeout: float = Field(
        default=60.0,
        gt=0,
        validation_alias=AliasChoices("FETCH_TIMEOUT_SECONDS", "fetch_timeout"),
    )

    # Server
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration loaded from environment.
    """
    return Settings()
