"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.rooms.value_objects import DEFAULT_CODE_LENGTH, MAX_CODE_LENGTH, MIN_CODE_LENGTH
from ..domain.shared.messages import ErrorMessages


class RoomSettings(BaseModel):
    """Room lifecycle configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    code_length: int = Field(default=DEFAULT_CODE_LENGTH, ge=MIN_CODE_LENGTH, le=MAX_CODE_LENGTH)
    max_code_attempts: int = Field(default=100, ge=1, le=10_000)
    retention_hours: int = Field(
        default=24,
        ge=1,
        validation_alias=AliasChoices("retention_hours", "room_timeout_hours"),
    )
    sweep_interval_minutes: int = Field(
        default=60,
        ge=1,
        validation_alias=AliasChoices("sweep_interval_minutes", "cleanup_interval_minutes"),
    )


class PusherSettings(BaseModel):
    """Pusher Channels configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    app_id: str = Field(default="", validation_alias=AliasChoices("app_id", "pusher_app_id"))
    key: str = Field(default="", validation_alias=AliasChoices("key", "pusher_key"))
    secret: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("secret", "pusher_secret")
    )
    cluster: str = Field(
        default="us2",
        pattern=r"^[a-z0-9-]+$",
        validation_alias=AliasChoices("cluster", "pusher_cluster"),
    )
    use_tls: bool = True
    timeout_seconds: int = Field(default=5, ge=1, le=60)

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.key and self.secret.get_secret_value())


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - ROOMS__RETENTION_HOURS, ROOMS__SWEEP_INTERVAL_MINUTES, etc. (nested)
    - PUSHER__APP_ID, PUSHER__KEY, PUSHER__SECRET, PUSHER__CLUSTER (nested)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    rooms: RoomSettings = Field(default_factory=RoomSettings)
    pusher: PusherSettings = Field(default_factory=PusherSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
