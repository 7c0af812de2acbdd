"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Jakarta",
        description="Timezone used to stamp notifications and device tokens",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    government_role_alias: str = Field(
        default="pemerintah",
        description="Role alias whose users receive every new report broadcast",
        min_length=1,
    )
    default_radius_km: float = Field(
        default=2.0,
        description="Alert radius for report categories without a specific radius",
        gt=0,
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional access token sent to the Expo push API",
    )
    push_enabled: bool = Field(
        default=True,
        description="Disable to skip every call to the push gateway",
    )
    push_chunk_size: int = Field(
        default=100,
        description="Maximum number of messages submitted in one push request",
        gt=0,
        le=100,
    )
    push_channel_id: str = Field(
        default="default",
        description="Android notification channel attached to every push message",
        min_length=1,
    )

    @model_validator(mode="after")
    def _normalize_log_level(self) -> "Settings":
        self.log_level = self.log_level.strip().upper() or "INFO"
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
