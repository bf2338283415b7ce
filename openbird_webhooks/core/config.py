"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="openbird-webhooks", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Receiver
    webhook_host: str = Field(default="0.0.0.0", alias="WEBHOOK_HOST")
    webhook_port: Optional[int] = Field(default=None, alias="WEBHOOK_PORT")
    webhook_path: str = Field(default="/", alias="WEBHOOK_PATH")

    # Pattern used by the on_message shorthand
    message_pattern: str = Field(default="im.message.*", alias="MESSAGE_PATTERN")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
