"""Typed settings loader for the OpenWeatherMap client."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT_SECONDS = 60.0


class Settings(BaseSettings):
    """Client settings supplied by the caller or loaded from the environment and `.env`.

    The API key may be left empty here; lookups reject an empty key before
    touching the network.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    api_key: str = Field(default="", alias="OWM_API_KEY", repr=False)
    units: str = Field(default="", alias="OWM_UNITS")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="OWM_BASE_URL")
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="OWM_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="OWM_LOG_LEVEL")

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: Any) -> Any:
        """Normalize the base URL so endpoint paths can be appended directly."""
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate values that pydantic types alone cannot express."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("OWM_BASE_URL must start with 'http://' or 'https://'.")
        if self.timeout_seconds <= 0:
            raise ValueError("OWM_TIMEOUT_SECONDS must be > 0.")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"OWM_LOG_LEVEL {self.log_level!r} is not a logging level name.")
        return self

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "base_url": self.base_url,
            "units": self.units or None,
            "timeout_seconds": self.timeout_seconds,
            "credential_configured": self.has_api_key,
        }


def load_settings(**overrides: Any) -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
