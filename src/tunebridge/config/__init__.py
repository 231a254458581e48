"""Configuration module for tunebridge."""

from .settings import (
    ApiSettings,
    HttpSettings,
    ObservabilitySettings,
    OdesliSettings,
    Settings,
    SpotifySettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "HttpSettings",
    "ObservabilitySettings",
    "OdesliSettings",
    "Settings",
    "SpotifySettings",
    "get_settings",
]
