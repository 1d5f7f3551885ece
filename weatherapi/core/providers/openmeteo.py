from __future__ import annotations

from typing import Optional

from requests import Response

from .base import HttpClient
from ..entities import Coordinates, Location, PlaceResolution, RawWeather
from ..geocoding import GeocodingResolver


CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "pressure_msl",
    "wind_speed_10m",
    "weather_code",
)
DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weather_code")


class OpenMeteoProvider(HttpClient):
    """Primary provider: Open-Meteo, queried by coordinates in metric units."""

    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1"

    def __init__(
        self,
        geocoder: GeocodingResolver,
        base_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.geocoder = geocoder
        self.base_url = (base_url or self.base_url).rstrip("/")

    # Public API ---------------------------------------------------------
    def current(self, location: Location) -> RawWeather:
        place = self._place_for(location)
        params = {
            "latitude": place.coordinates.latitude,
            "longitude": place.coordinates.longitude,
            "current": ",".join(CURRENT_FIELDS),
            "wind_speed_unit": "ms",
            "timezone": "auto",
            "timeformat": "unixtime",
        }
        data = self._fetch(params)
        self._log.info(
            "Open-Meteo weather data retrieved",
            extra={"lat": place.coordinates.latitude, "lon": place.coordinates.longitude, "city": place.name},
        )
        return RawWeather(source=self.name, payload=data, place=place)

    def forecast(self, location: Location, days: int) -> RawWeather:
        place = self._place_for(location)
        params = {
            "latitude": place.coordinates.latitude,
            "longitude": place.coordinates.longitude,
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
            "forecast_days": days,
        }
        data = self._fetch(params)
        self._log.info("Open-Meteo forecast retrieved", extra={"city": place.name, "days": days})
        return RawWeather(source=self.name, payload=data, place=place)

    # Helpers ------------------------------------------------------------
    def _place_for(self, location: Location) -> PlaceResolution:
        if location.coordinates is not None:
            return unnamed_place(location.coordinates)
        return self.geocoder.resolve(location.city or "", location.country)

    def _fetch(self, params: dict) -> dict:
        response = self._request("GET", f"{self.base_url}/forecast", params=params)
        return self._json(response) or {}

    def _error_detail(self, response: Response) -> str:
        try:
            reason = (response.json() or {}).get("reason")
        except ValueError:
            reason = None
        return reason or f"HTTP {response.status_code}"


def unnamed_place(coordinates: Coordinates) -> PlaceResolution:
    return PlaceResolution(coordinates=coordinates, name="Unknown City", country="Unknown")


__all__ = ["OpenMeteoProvider", "unnamed_place"]
