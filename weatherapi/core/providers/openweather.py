"""OpenWeather weather provider, used as the fallback source."""
from __future__ import annotations

import random
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from requests import Response

from .base import HttpClient
from ..entities import Coordinates, Location, RawWeather
from ..errors import UpstreamError


MOCK_BASE_KELVIN = 288.15
SAMPLES_PER_DAY = 8
UNAUTHORIZED_SIGNALS = ("401", "unauthorized", "invalid api key")


class OpenWeatherProvider(HttpClient):
    """Integration with the OpenWeather current weather and 5 day forecast endpoints.

    Temperatures are requested in standard units (Kelvin). An invalid or
    missing API key does not fail the request: the provider answers with
    generated data of the same shape instead.
    """

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: Optional[str] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._rng = rng or random.Random()
        self._clock = clock

    # Public API ---------------------------------------------------------
    def current(self, location: Location) -> RawWeather:
        params = self._location_params(location)
        try:
            data = self._fetch("weather", params)
        except UpstreamError as exc:
            if not is_unauthorized(exc):
                raise
            self._log.warning("API key invalid, returning mock data", extra=location.log_context())
            return RawWeather(source=self.name, payload=self.mock_current_payload(location))
        self._log.info("Weather data retrieved successfully", extra=location.log_context())
        return RawWeather(source=self.name, payload=data)

    def forecast(self, location: Location, days: int) -> RawWeather:
        params = self._location_params(location)
        params["cnt"] = days * SAMPLES_PER_DAY
        try:
            data = self._fetch("forecast", params)
        except UpstreamError as exc:
            if not is_unauthorized(exc):
                raise
            self._log.warning("API key invalid, returning mock forecast data", extra=location.log_context())
            return RawWeather(source=self.name, payload=self.mock_forecast_payload(location, days))
        self._log.info("Weather forecast retrieved successfully", extra={**location.log_context(), "days": days})
        return RawWeather(source=self.name, payload=data)

    # Mock data ----------------------------------------------------------
    def mock_current_payload(self, location: Location) -> Dict[str, Any]:
        """Generate a current weather payload shaped like OpenWeather's."""
        if location.coordinates is not None:
            city, country = demo_city_name(location.coordinates), "UA"
        else:
            city, country = location.city or "Unknown City", location.country or "UA"
        rng = self._rng
        return {
            "name": city,
            "sys": {"country": country},
            "main": {
                "temp": MOCK_BASE_KELVIN + rng.randint(-10, 20),
                "feels_like": MOCK_BASE_KELVIN + rng.randint(-10, 20),
                "humidity": rng.randint(30, 90),
                "pressure": rng.randint(1000, 1030),
            },
            "wind": {"speed": rng.randint(1, 15)},
            "weather": [{"description": "clear sky", "icon": "01d"}],
            "dt": int(self._clock()),
        }

    def mock_forecast_payload(self, location: Location, days: int) -> Dict[str, Any]:
        """Generate ``days`` worth of 3-hour forecast entries starting today (UTC)."""
        rng = self._rng
        today = datetime.fromtimestamp(self._clock(), tz=timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
        entries: List[Dict[str, Any]] = []
        for day in range(days):
            base_temp = MOCK_BASE_KELVIN + rng.randint(-5, 15)
            for hour in range(0, 24, 24 // SAMPLES_PER_DAY):
                stamp = today + timedelta(days=day, hours=hour)
                entries.append(
                    {
                        "dt": int(stamp.timestamp()),
                        "main": {
                            "temp": base_temp + rng.randint(-3, 3),
                            "feels_like": base_temp + rng.randint(-3, 3),
                            "humidity": rng.randint(30, 90),
                            "pressure": rng.randint(1000, 1030),
                        },
                        "wind": {"speed": rng.randint(1, 15)},
                        "weather": [{"description": "clear sky", "icon": "01d"}],
                    }
                )
        return {"cnt": len(entries), "list": entries, "city": {"name": location.city or "Unknown City"}}

    # Helpers ------------------------------------------------------------
    def _location_params(self, location: Location) -> Dict[str, Any]:
        params: Dict[str, Any] = {"appid": self.api_key, "units": "standard"}
        if location.coordinates is not None:
            params["lat"] = location.coordinates.latitude
            params["lon"] = location.coordinates.longitude
        else:
            params["q"] = f"{location.city},{location.country}" if location.country else location.city
        return params

    def _fetch(self, endpoint: str, params: Dict[str, Any]) -> dict:
        response = self._request("GET", f"{self.base_url}/{endpoint}", params=params)
        return self._json(response) or {}

    def _error_detail(self, response: Response) -> str:
        try:
            message = (response.json() or {}).get("message")
        except ValueError:
            message = None
        return message or f"HTTP {response.status_code}"


def is_unauthorized(exc: UpstreamError) -> bool:
    if exc.status_code == 401:
        return True
    message = str(exc).lower()
    return any(signal in message for signal in UNAUTHORIZED_SIGNALS)


def demo_city_name(coordinates: Coordinates) -> str:
    lat, lon = coordinates.latitude, coordinates.longitude
    if 50 <= lat <= 51 and 30 <= lon <= 31:
        return "Kyiv"
    if 49 <= lat <= 50 and 23 <= lon <= 24:
        return "Lviv"
    if 46 <= lat <= 47 and 30 <= lon <= 31:
        return "Odessa"
    return "Unknown City"


__all__ = ["OpenWeatherProvider", "is_unauthorized", "demo_city_name"]
