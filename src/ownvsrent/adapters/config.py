# src/ownvsrent/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppConfig(BaseSettings):
    """
    Process settings, read from OWNVSRENT_* environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="OWNVSRENT_",
        case_sensitive=False,
        extra="ignore",
    )

    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # Saved scenarios live here (any SQLAlchemy URL sqlmodel accepts)
    DB_URI: str = Field(default="sqlite:///ownvsrent.db")

    # Share links are built on top of this address
    SHARE_BASE_URL: str = Field(default="http://localhost:8000/")

    # Longest projection served; longer horizons are clamped to it
    MAX_HORIZON_YEARS: int = Field(default=50)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("MAX_HORIZON_YEARS", mode="before")
    @classmethod
    def _positive_years(cls, v: Any) -> Any:
        years = int(float(v))
        if years < 1:
            raise ValueError("MAX_HORIZON_YEARS must be at least 1")
        return years


config = AppConfig()
