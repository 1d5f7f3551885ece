"""Map provider-shaped payloads onto the canonical weather model.

Everything here is pure: payloads come in, entities go out. Unit conversion
into Celsius/hPa/m/s happens here; client-requested units are applied later
by :mod:`weatherapi.core.transform`.
"""
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Tuple

from .catalogs import DEFAULT_ICON, OPEN_METEO, UNKNOWN_DESCRIPTION, WeatherCodeCatalog
from .entities import ForecastDay, RawWeather, WeatherSnapshot
from .errors import UpstreamError
from .rounding import round_half_up, round_int


KELVIN_OFFSET = 273.15
DEFAULT_DAILY_HUMIDITY = 70
DEFAULT_DAILY_PRESSURE = 1013
DEFAULT_CONDITION = "clear sky"

PRIMARY_SOURCE = "open-meteo"
SECONDARY_SOURCE = "openweather"


def kelvin_to_celsius(value: float) -> float:
    return round_half_up(float(value) - KELVIN_OFFSET, 1)


def normalize_current(raw: RawWeather, catalog: WeatherCodeCatalog = OPEN_METEO) -> WeatherSnapshot:
    _check_source(raw)
    try:
        if raw.source == PRIMARY_SOURCE:
            return _open_meteo_current(raw, catalog)
        return _openweather_current(raw.payload)
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise UpstreamError(f"Malformed {raw.source} response: {exc!r}") from exc


def normalize_forecast(raw: RawWeather, days: int, catalog: WeatherCodeCatalog = OPEN_METEO) -> List[ForecastDay]:
    _check_source(raw)
    try:
        if raw.source == PRIMARY_SOURCE:
            return _open_meteo_daily(raw.payload, days, catalog)
        return _openweather_daily(raw.payload, days)
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise UpstreamError(f"Malformed {raw.source} forecast: {exc!r}") from exc


def _check_source(raw: RawWeather) -> None:
    if raw.source not in (PRIMARY_SOURCE, SECONDARY_SOURCE):
        raise ValueError(f"Unknown weather source: {raw.source}")


# Open-Meteo -----------------------------------------------------------------
def _open_meteo_current(raw: RawWeather, catalog: WeatherCodeCatalog) -> WeatherSnapshot:
    current = raw.payload["current"]
    description, icon = catalog.lookup(current.get("weather_code"))
    place = raw.place
    observed = current.get("time")
    return WeatherSnapshot(
        city=place.name if place else "Unknown City",
        country=place.country if place else "Unknown",
        temperature_c=round_half_up(float(current["temperature_2m"]), 1),
        feels_like_c=round_half_up(float(current["apparent_temperature"]), 1),
        humidity_pct=round_int(float(current["relative_humidity_2m"])),
        pressure_hpa=round_half_up(float(current["pressure_msl"])),
        wind_speed_ms=round_half_up(float(current["wind_speed_10m"]), 1),
        description=description,
        icon=icon,
        observed_at=int(observed) if isinstance(observed, (int, float)) else int(time.time()),
        source=raw.source,
        country_code=place.country_code if place else "",
    )


def _open_meteo_daily(payload: Mapping[str, Any], days: int, catalog: WeatherCodeCatalog) -> List[ForecastDay]:
    daily = payload["daily"]
    dates = daily["time"]
    result: Dict[str, ForecastDay] = {}
    for idx, date in enumerate(dates[:days]):
        condition = catalog.description(daily["weather_code"][idx])
        result[date] = ForecastDay(
            date=date,
            min_temp_c=round_half_up(float(daily["temperature_2m_min"][idx]), 1),
            max_temp_c=round_half_up(float(daily["temperature_2m_max"][idx]), 1),
            avg_humidity_pct=DEFAULT_DAILY_HUMIDITY,
            avg_pressure_hpa=DEFAULT_DAILY_PRESSURE,
            main_condition=condition,
            conditions=(condition,),
            sample_count=1,
        )
    return [result[date] for date in sorted(result)]


# OpenWeather ----------------------------------------------------------------
def _openweather_current(payload: Mapping[str, Any]) -> WeatherSnapshot:
    main = payload["main"]
    country_code = (payload.get("sys") or {}).get("country") or ""
    description, icon = _openweather_condition(payload)
    return WeatherSnapshot(
        city=payload.get("name") or "Unknown City",
        country=country_code or "Unknown",
        temperature_c=kelvin_to_celsius(main["temp"]),
        feels_like_c=kelvin_to_celsius(main["feels_like"]),
        humidity_pct=round_int(float(main["humidity"])),
        pressure_hpa=round_half_up(float(main["pressure"]), 2),
        wind_speed_ms=round_half_up(float((payload.get("wind") or {}).get("speed") or 0), 1),
        description=description,
        icon=icon,
        observed_at=int(payload["dt"]),
        source=SECONDARY_SOURCE,
        country_code=country_code,
    )


def _openweather_condition(payload: Mapping[str, Any]) -> Tuple[str, str]:
    weather = payload.get("weather") or [{}]
    first = weather[0] or {}
    return first.get("description") or UNKNOWN_DESCRIPTION, first.get("icon") or DEFAULT_ICON


def _openweather_daily(payload: Mapping[str, Any], days: int) -> List[ForecastDay]:
    """Bucket 3-hour entries into calendar days (UTC) and aggregate each day."""
    buckets: Dict[str, Dict[str, Any]] = {}
    for item in payload.get("list") or []:
        date = datetime.fromtimestamp(int(item["dt"]), tz=timezone.utc).date().isoformat()
        main = item["main"]
        bucket = buckets.setdefault(
            date,
            {"temps": [], "humidity": [], "pressure": [], "conditions": []},
        )
        bucket["temps"].append(float(main["temp"]))
        bucket["humidity"].append(float(main["humidity"]))
        bucket["pressure"].append(float(main["pressure"]))
        condition = _openweather_condition(item)[0]
        if condition not in bucket["conditions"]:
            bucket["conditions"].append(condition)

    result: List[ForecastDay] = []
    for date in sorted(buckets)[:days]:
        bucket = buckets[date]
        count = len(bucket["temps"])
        conditions = tuple(bucket["conditions"])
        result.append(
            ForecastDay(
                date=date,
                min_temp_c=kelvin_to_celsius(min(bucket["temps"])),
                max_temp_c=kelvin_to_celsius(max(bucket["temps"])),
                avg_humidity_pct=round_int(sum(bucket["humidity"]) / count),
                avg_pressure_hpa=round_half_up(sum(bucket["pressure"]) / count, 2),
                main_condition=conditions[0] if conditions else DEFAULT_CONDITION,
                conditions=conditions,
                sample_count=count,
            )
        )
    return result


__all__ = [
    "normalize_current",
    "normalize_forecast",
    "kelvin_to_celsius",
    "PRIMARY_SOURCE",
    "SECONDARY_SOURCE",
]
