"""Client-facing projection and unit conversion of normalized records."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from .entities import FilterOptions, ForecastDay
from .rounding import round_half_up


def celsius_to_fahrenheit(value: float) -> float:
    return round_half_up(value * 9 / 5 + 32, 1)


def ms_to_mph(value: float) -> float:
    return round_half_up(value * 2.237, 1)


def hpa_to_inhg(value: float) -> float:
    return round_half_up(value * 0.02953, 2)


def temperature_category(value: float) -> str:
    if value < 0:
        return "freezing"
    if value < 10:
        return "cold"
    if value < 20:
        return "cool"
    if value < 30:
        return "warm"
    return "hot"


def humidity_category(value: float) -> str:
    if value < 30:
        return "dry"
    if value < 60:
        return "comfortable"
    return "humid"


def wind_category(value: float) -> str:
    if value < 5:
        return "calm"
    if value < 15:
        return "light"
    if value < 25:
        return "moderate"
    return "strong"


class FilterTransformer:
    """Apply field projection, unit conversion and computed categories.

    Steps run in a fixed order and each one sees the output of the previous
    one, so computed categories are derived from already converted values.
    """

    def apply(self, record: Mapping[str, Any], options: FilterOptions) -> Dict[str, Any]:
        data = dict(record)
        if options.fields is not None:
            data = {key: value for key, value in data.items() if key in options.fields}

        if options.temperature_unit == "fahrenheit":
            for key in ("temperature", "feels_like"):
                if data.get(key) is not None:
                    data[key] = celsius_to_fahrenheit(data[key])

        if options.wind_unit == "mph" and data.get("wind_speed") is not None:
            data["wind_speed"] = ms_to_mph(data["wind_speed"])

        if options.pressure_unit == "inHg" and data.get("pressure") is not None:
            data["pressure"] = hpa_to_inhg(data["pressure"])

        # Appended after projection: computed fields always appear.
        if options.include_computed:
            data["temperature_category"] = temperature_category(data.get("temperature") or 0)
            data["humidity_category"] = humidity_category(data.get("humidity") or 0)
            data["wind_category"] = wind_category(data.get("wind_speed") or 0)

        return data

    def apply_forecast(self, days: Iterable[ForecastDay], options: FilterOptions) -> Dict[str, Dict[str, Any]]:
        """Render a forecast keyed by date, converting min/max temperatures."""
        result: Dict[str, Dict[str, Any]] = {}
        for day in days:
            data = day.as_dict()
            if options.temperature_unit == "fahrenheit":
                data["min_temp"] = celsius_to_fahrenheit(data["min_temp"])
                data["max_temp"] = celsius_to_fahrenheit(data["max_temp"])
            result[day.date] = data
        return result


__all__ = [
    "FilterTransformer",
    "celsius_to_fahrenheit",
    "ms_to_mph",
    "hpa_to_inhg",
    "temperature_category",
    "humidity_category",
    "wind_category",
]
