from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from .errors import ValidationError


TEMPERATURE_UNITS = ("celsius", "fahrenheit")
WIND_UNITS = ("ms", "mph")
PRESSURE_UNITS = ("hPa", "inHg")


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    @classmethod
    def validated(cls, latitude: float, longitude: float) -> "Coordinates":
        if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
            raise ValidationError("Invalid coordinates range")
        return cls(latitude=latitude, longitude=longitude)


@dataclass(frozen=True)
class PlaceResolution:
    """A geocoded place, as returned by the geocoding provider."""

    coordinates: Coordinates
    name: str
    country: str
    country_code: str = ""


@dataclass(frozen=True)
class Location:
    """What the client asked for: a named place or explicit coordinates."""

    city: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None

    @classmethod
    def for_city(cls, city: str, country: Optional[str] = None) -> "Location":
        city = (city or "").strip()
        if not city:
            raise ValidationError("City parameter is required")
        return cls(city=city, country=(country or "").strip() or None)

    @classmethod
    def for_coordinates(cls, coordinates: Coordinates) -> "Location":
        return cls(coordinates=coordinates)

    @property
    def is_coordinates(self) -> bool:
        return self.coordinates is not None

    def log_context(self) -> Dict[str, Any]:
        if self.coordinates is not None:
            return {"lat": self.coordinates.latitude, "lon": self.coordinates.longitude}
        return {"city": self.city, "country": self.country or ""}


@dataclass(frozen=True)
class RawWeather:
    """An upstream payload tagged with the provider that produced it."""

    source: str
    payload: Mapping[str, Any]
    place: Optional[PlaceResolution] = None


@dataclass(frozen=True)
class WeatherSnapshot:
    """Normalized current weather.

    Values are stored in one set of units regardless of the provider:
    - temperature in Celsius
    - humidity in percent
    - pressure in hectopascal (hPa)
    - wind speed in metres per second (m/s)
    """

    city: str
    country: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    pressure_hpa: float
    wind_speed_ms: float
    description: str
    icon: str
    observed_at: int
    source: str
    country_code: str = ""

    def as_dict(self, tz: tzinfo = timezone.utc) -> Dict[str, Any]:
        observed = datetime.fromtimestamp(self.observed_at, tz=tz)
        return {
            "city": self.city,
            "country": self.country,
            "country_code": self.country_code,
            "temperature": self.temperature_c,
            "feels_like": self.feels_like_c,
            "humidity": self.humidity_pct,
            "pressure": self.pressure_hpa,
            "wind_speed": self.wind_speed_ms,
            "description": self.description,
            "icon": self.icon,
            "timestamp": self.observed_at,
            "formatted_time": observed.strftime("%Y-%m-%d %H:%M:%S"),
        }


@dataclass(frozen=True)
class ForecastDay:
    """One calendar day of forecast, aggregated from one or more samples."""

    date: str
    min_temp_c: float
    max_temp_c: float
    avg_humidity_pct: int
    avg_pressure_hpa: float
    main_condition: str
    conditions: Tuple[str, ...]
    sample_count: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "min_temp": self.min_temp_c,
            "max_temp": self.max_temp_c,
            "avg_humidity": self.avg_humidity_pct,
            "avg_pressure": self.avg_pressure_hpa,
            "main_condition": self.main_condition,
            "conditions": list(self.conditions),
            "forecasts_count": self.sample_count,
        }


@dataclass(frozen=True)
class FilterOptions:
    fields: Optional[FrozenSet[str]] = None
    temperature_unit: str = "celsius"
    wind_unit: str = "ms"
    pressure_unit: str = "hPa"
    include_computed: bool = False

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "FilterOptions":
        """Build options from request query parameters."""

        raw_fields = params.get("fields")
        fields = None
        if raw_fields:
            fields = frozenset(name.strip() for name in raw_fields.split(",") if name.strip())

        return cls(
            fields=fields,
            temperature_unit=_choice(params, "temperature_unit", TEMPERATURE_UNITS),
            wind_unit=_choice(params, "wind_unit", WIND_UNITS),
            pressure_unit=_choice(params, "pressure_unit", PRESSURE_UNITS),
            include_computed="include_computed" in params,
        )


def _choice(params: Mapping[str, str], name: str, allowed: Tuple[str, ...]) -> str:
    value = params.get(name)
    if value not in allowed:
        return allowed[0]
    return value


__all__ = [
    "Coordinates",
    "PlaceResolution",
    "Location",
    "RawWeather",
    "WeatherSnapshot",
    "ForecastDay",
    "FilterOptions",
]
