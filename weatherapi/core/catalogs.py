"""WMO weather code lookup tables.

Two independent tables are kept: the English one used for Open-Meteo
responses and the Ukrainian one the legacy serverless handlers served. Both
group related codes into OpenWeather style icon buckets.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


UNKNOWN_DESCRIPTION = "unknown"
DEFAULT_ICON = "01d"


@dataclass(frozen=True)
class WeatherCodeCatalog:
    name: str
    descriptions: Mapping[int, str]
    icons: Mapping[int, str]

    def description(self, code: object) -> str:
        return self.descriptions.get(_as_code(code), UNKNOWN_DESCRIPTION)

    def icon(self, code: object) -> str:
        return self.icons.get(_as_code(code), DEFAULT_ICON)

    def lookup(self, code: object) -> Tuple[str, str]:
        return self.description(code), self.icon(code)


def _as_code(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return -1


def _bucketed(groups: Mapping[str, Tuple[int, ...]]) -> Mapping[int, str]:
    return MappingProxyType({code: icon for icon, codes in groups.items() for code in codes})


OPEN_METEO = WeatherCodeCatalog(
    name="open-meteo",
    descriptions=MappingProxyType(
        {
            0: "clear sky",
            1: "mainly clear",
            2: "partly cloudy",
            3: "overcast",
            45: "fog",
            48: "depositing rime fog",
            51: "light drizzle",
            53: "moderate drizzle",
            55: "dense drizzle",
            56: "light freezing drizzle",
            57: "dense freezing drizzle",
            61: "slight rain",
            63: "moderate rain",
            65: "heavy rain",
            66: "light freezing rain",
            67: "heavy freezing rain",
            71: "slight snow fall",
            73: "moderate snow fall",
            75: "heavy snow fall",
            77: "snow grains",
            80: "slight rain showers",
            81: "moderate rain showers",
            82: "violent rain showers",
            85: "slight snow showers",
            86: "heavy snow showers",
            95: "thunderstorm",
            96: "thunderstorm with slight hail",
            99: "thunderstorm with heavy hail",
        }
    ),
    icons=_bucketed(
        {
            "01d": (0,),
            "02d": (1,),
            "03d": (2,),
            "04d": (3,),
            "50d": (45, 48),
            "09d": (51, 53, 55, 80, 81, 82),
            "10d": (61, 63, 65),
            "13d": (56, 57, 66, 67, 71, 73, 75, 77, 85, 86),
            "11d": (95, 96, 99),
        }
    ),
)

LEGACY = WeatherCodeCatalog(
    name="legacy",
    descriptions=MappingProxyType(
        {
            0: "Ясно",
            1: "Переважно ясно",
            2: "Частково хмарно",
            3: "Хмарно",
            4: "Хмарно",
            5: "Туман",
            6: "Туман",
            7: "Туман",
            8: "Туман",
            45: "Туман",
            48: "Туман",
            51: "Легкий дощ",
            53: "Помірний дощ",
            55: "Сильний дощ",
            56: "Легкий мокрий сніг",
            57: "Сильний мокрий сніг",
            61: "Легкий дощ",
            63: "Помірний дощ",
            65: "Сильний дощ",
            66: "Легкий мокрий сніг",
            67: "Сильний мокрий сніг",
            71: "Легкий сніг",
            73: "Помірний сніг",
            75: "Сильний сніг",
            77: "Сніжні зерна",
            80: "Легкі зливи",
            81: "Помірні зливи",
            82: "Сильні зливи",
            85: "Легкі снігові зливи",
            86: "Сильні снігові зливи",
            95: "Гроза",
            96: "Гроза з легким градом",
            99: "Гроза з сильним градом",
        }
    ),
    icons=_bucketed(
        {
            "01d": (0,),
            "02d": (1,),
            "03d": (2,),
            "04d": (3, 4),
            "50d": (5, 6, 7, 8, 45, 48),
            "10d": (51, 53, 55, 61, 63, 65),
            "09d": (80, 81, 82),
            "13d": (56, 57, 66, 67, 71, 73, 75, 77, 85, 86),
            "11d": (95, 96, 99),
        }
    ),
)


def catalog_for(language: str) -> WeatherCodeCatalog:
    if (language or "").lower().startswith("uk"):
        return LEGACY
    return OPEN_METEO


__all__ = ["WeatherCodeCatalog", "OPEN_METEO", "LEGACY", "catalog_for", "UNKNOWN_DESCRIPTION", "DEFAULT_ICON"]
