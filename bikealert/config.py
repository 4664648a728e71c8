"""Centralised settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bikealert.domain.entities import Coordinate
from bikealert.domain.errors import ConfigurationError


class Settings(BaseSettings):
    # Vendor endpoint
    base_url: str = "https://app.jumpbikes.com"
    network_id: str = "3"  # San Francisco
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_14_6) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/76.0.3809.100 Safari/537.36"
    )

    # Timeouts
    http_timeout_seconds: float = Field(5.0, gt=0)
    fetch_deadline_seconds: float = Field(5.0, gt=0)

    # Report
    nearest_limit: int = Field(5, ge=0)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BIKEALERT_", env_file=".env", extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return level


class OriginSettings(BaseSettings):
    """The reference point, read from the unprefixed ``LAT`` / ``LNG``."""

    lat: float
    lng: float

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError("config.settings", _describe(exc, "BIKEALERT_")) from exc


def load_origin() -> Coordinate:
    """Return the user's coordinate or raise ``ConfigurationError``."""
    try:
        origin = OriginSettings()
    except ValidationError as exc:
        raise ConfigurationError("config.origin", _describe(exc)) from exc
    return Coordinate(latitude=origin.lat, longitude=origin.lng)


def _describe(exc: ValidationError, prefix: str = "") -> str:
    parts = []
    for err in exc.errors():
        field = prefix + ".".join(str(p) for p in err["loc"])
        if err["type"] == "missing":
            parts.append(f"envvar {field.upper()!r} not set")
        else:
            parts.append(f"envvar {field.upper()!r}: {err['msg']}")
    return "; ".join(parts)
