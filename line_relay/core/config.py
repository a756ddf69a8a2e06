"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Outbound credentials are only absence-checked at call time.
    LINE_CHANNEL_ACCESS_TOKEN: str | None = Field(default=None)
    LINE_REPLY_API_URL: str = Field(default="https://api.line.me/v2/bot/message/reply")
    MAX_LINE_TEXT_LENGTH: int = Field(default=5000)
    CHAT_BACKEND_BASE_URL: str | None = Field(default=None)

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    LINE_RELAY_LOG_LEVEL: str = Field(default="info")
    LINE_RELAY_LOG_DIR: Path | None = Field(default=None)
    LINE_RELAY_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    LOG_PSEUDONYM_SECRET: str = Field(default="line-relay")


settings = Settings()
config = settings  # Alias used by route and adapter modules


__all__ = ["Settings", "settings", "config"]
