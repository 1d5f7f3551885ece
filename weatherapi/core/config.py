from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class WeatherConfig:
    """Upstream endpoints and keys, built once at startup."""

    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    openmeteo_base_url: str = "https://api.open-meteo.com/v1"
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    language: str = "en"
    http_timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Optional[Any] = None) -> "WeatherConfig":
        if settings is None:
            from django.conf import settings as django_settings

            settings = django_settings
        defaults = cls()
        return cls(
            openweather_api_key=getattr(settings, "OPENWEATHER_API_KEY", defaults.openweather_api_key),
            openweather_base_url=getattr(settings, "OPENWEATHER_BASE_URL", defaults.openweather_base_url).rstrip("/"),
            openmeteo_base_url=getattr(settings, "OPENMETEO_BASE_URL", defaults.openmeteo_base_url).rstrip("/"),
            geocoding_url=getattr(settings, "GEOCODING_URL", defaults.geocoding_url),
            language=getattr(settings, "WEATHER_LANGUAGE", defaults.language),
            http_timeout=float(getattr(settings, "WEATHER_HTTP_TIMEOUT", defaults.http_timeout)),
        )


__all__ = ["WeatherConfig"]
