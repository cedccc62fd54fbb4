"""Application configuration."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".calorie_tracker")
    entries_key: str = "cal_entries_v1"
    settings_key: str = "cal_settings_v1"
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CALORIE_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        return parse_timezone(value)


def parse_timezone(raw: str | None) -> str | None:
    """Normalize a timezone name, treating blank values as unset."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    try:
        ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {cleaned}") from exc
    return cleaned
