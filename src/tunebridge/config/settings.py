"""Application settings loaded from environment variables.

Hey future me - every settings group has its OWN env prefix (ODESLI_, SPOTIFY_, HTTP_, ...)
so a flat .env file stays readable. The root Settings object just composes the groups.
Call get_settings() everywhere instead of instantiating Settings() - it's cached, so the
environment is parsed exactly once per process.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnrichmentStrategyName = Literal["data", "preview"]


class OdesliSettings(BaseSettings):
    """Odesli (song.link) link-resolution service settings."""

    model_config = SettingsConfigDict(
        env_prefix="ODESLI_", env_file=".env", extra="ignore"
    )

    base_url: str = Field(
        default="https://api.song.link/v1-alpha.1",
        description="Base URL of the Odesli API (the /links endpoint is appended)",
    )
    user_country: str | None = Field(
        default=None,
        description="Optional two-letter country code forwarded as userCountry",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize base URL so endpoint joins never produce '//'."""
        return value.rstrip("/")


class SpotifySettings(BaseSettings):
    """Spotify enrichment settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPOTIFY_", env_file=".env", extra="ignore"
    )

    # Hey future me - "data" is the rich, type-aware strategy (album vs track, extra page
    # scrapes for album name and release date). "preview" is the cheap flat one. Pick ONE per
    # deployment, they never run side by side.
    enrichment_strategy: EnrichmentStrategyName = Field(
        default="data", description="Enrichment strategy: 'data' or 'preview'"
    )
    authoritative_platform: str = Field(
        default="spotify",
        description="Key in Odesli's linksByPlatform used for enrichment",
    )
    embed_base_url: str = Field(
        default="https://open.spotify.com/embed",
        description="Base URL of Spotify's embed pages",
    )


class HttpSettings(BaseSettings):
    """Shared HTTP client pool settings."""

    model_config = SettingsConfigDict(
        env_prefix="HTTP_", env_file=".env", extra="ignore"
    )

    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")
    max_connections: int = Field(default=50, gt=0)
    max_keepalive: int = Field(default=20, ge=0)


class ObservabilitySettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVABILITY_", env_file=".env", extra="ignore"
    )

    log_json_format: bool = Field(
        default=False, description="Emit JSON logs (recommended for production)"
    )
    log_request_body: bool = Field(default=False)


class ApiSettings(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_", env_file=".env", extra="ignore"
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8000, gt=0, lt=65536)


class Settings(BaseSettings):
    """Root application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "tunebridge"
    log_level: str = "INFO"

    odesli: OdesliSettings = Field(default_factory=OdesliSettings)
    spotify: SpotifySettings = Field(default_factory=SpotifySettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    observability: ObservabilitySettings = Field(
        default_factory=ObservabilitySettings
    )
    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject log levels the logging module doesn't know."""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
