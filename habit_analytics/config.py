from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables and .env file."""

    APP_NAME: str = "Habit Analytics Service"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENGINE_LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_MAX_BYTES: int = 10_000_000
    LOG_BACKUP_COUNT: int = 5

    DEFAULT_WEEKS: int = Field(default=12, ge=1)
    DEFAULT_MONTHS: int = Field(default=6, ge=1)
    MAX_PERIODS: int = Field(default=104, ge=1)
    HISTORY_LIMIT: int = Field(default=10, ge=0)
    SUMMARY_WINDOW_DAYS: int = Field(default=30, ge=1)

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
