from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The numeric fields are the defaults for the matching command-line flags,
    so ``TOBUDDY_TARGET_HOURS=80`` changes what ``--target`` falls back to.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOBUDDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "tobuddy"
    app_version: str = "2.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    earned_hours: int = 0
    earned_minutes: int = 0
    hours_per_pay_period: int = 0
    minutes_per_pay_period: int = 0
    target_hours: int = 40


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached instance so the next call re-reads the environment."""
    global _settings
    _settings = None
