"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SKILL_LOG_LEVEL: str = Field(default="info")
    SKILL_LOG_DIR: Path | None = Field(default=None)
    LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    # Leave unset to accept envelopes for any skill id.
    ALEXA_SKILL_ID: str | None = Field(default=None)
    ENTITY_INTENT_NAME: str = Field(default="EntityIntent")
    ENTITY_SLOT_NAME: str = Field(default="actor")
    ENTITY_AUTHORITY: str = Field(default="AlexaEntities")
    ENTITY_API_TIMEOUT_SECONDS: float = Field(default=5.0)
    SKILL_USER_AGENT: str = Field(default="sample/hello-world/v1.2")

    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=True)


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
