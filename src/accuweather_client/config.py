"""Typed settings loader for the AccuWeather client."""

from __future__ import annotations

from typing import Any

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

DEFAULT_BASE_URL = "https://dataservice.accuweather.com"
DEFAULT_USER_AGENT = "accuweather-client/0.1"


class Settings(BaseSettings):
    """Client settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(alias="ACCUWEATHER_API_KEY", repr=False)
    location: int | None = Field(default=None, alias="ACCUWEATHER_LOCATION")
    base_url: AnyUrl = Field(default=AnyUrl(DEFAULT_BASE_URL), alias="ACCUWEATHER_BASE_URL")
    timeout_seconds: float = Field(default=15.0, alias="ACCUWEATHER_TIMEOUT_SECONDS")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="ACCUWEATHER_USER_AGENT")

    @field_validator("location", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat an empty env-string location as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        if not self.api_key.strip():
            raise ValueError("ACCUWEATHER_API_KEY must not be empty.")
        if self.timeout_seconds <= 0:
            raise ValueError("ACCUWEATHER_TIMEOUT_SECONDS must be > 0.")
        if not self.user_agent.strip():
            raise ValueError("ACCUWEATHER_USER_AGENT must not be empty.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "base_url": str(self.base_url),
            "location": self.location,
            "timeout_seconds": self.timeout_seconds,
            "user_agent": self.user_agent,
            "api_key_configured": bool(self.api_key),
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {_describe_errors(exc)}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc


def _describe_errors(exc: ValidationError) -> str:
    # Input values are left out so a rejected API key never reaches the message.
    parts = []
    for error in exc.errors(include_url=False, include_input=False):
        location = ".".join(str(item) for item in error["loc"]) or "settings"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
