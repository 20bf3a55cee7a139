"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from yousync.utils.constants import (
    DEFAULT_DEDUP_CAPACITY,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    YOUSYNC_GITHUB_TOKEN: str | None = None

    # YouTrack settings
    YOUSYNC_YOUTRACK_TOKEN: str | None = None
    REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # Synchronization settings
    POLL_INTERVAL: float = DEFAULT_POLL_INTERVAL
    DEDUP_CAPACITY: int = DEFAULT_DEDUP_CAPACITY


settings = Settings()
