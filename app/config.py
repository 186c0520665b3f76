"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify JWT access tokens", min_length=1
    )
    jwt_algorithm: str = Field(
        default="HS256", description="Algorithm the access tokens are signed with"
    )
    app_timezone: str = Field(
        default="UTC", description="Timezone used to stamp messages and notifications"
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to reach the API and the realtime hubs",
    )
    log_level: str = Field(default="INFO", description="Level for the ``app`` logger")
    realtime_push_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Maximum seconds a single websocket push may take before it is dropped",
    )
    realtime_max_fanout_concurrency: int | None = Field(
        default=None,
        gt=0,
        description="Upper bound of concurrent pushes issued for a single fan-out",
    )
    message_history_limit: int = Field(
        default=200,
        gt=0,
        description="Maximum number of messages returned by history queries",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
