"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./activity.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone used to decide calendar days for activity buckets",
    )
    order_update_threshold_minutes: int = Field(
        default=60,
        description="Minutes an order must stay untouched before an update shows as its own entry",
        gt=0,
    )
    recent_activity_limit: int = Field(
        default=4,
        description="Number of items returned by the dashboard recent activity feed",
        gt=0,
    )
    currency_symbol: str = Field(
        default="₹",
        description="Symbol prefixed to order totals in activity subtitles",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("app_timezone")
    @classmethod
    def _strip_timezone(cls, value: str) -> str:
        return value.strip()


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
