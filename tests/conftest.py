from __future__ import annotations

import pytest


MAY_FIRST_UTC = 1714521600  # 2024-05-01T00:00:00Z


@pytest.fixture()
def geocoding_payload() -> dict:
    return {
        "results": [
            {
                "name": "Kyiv",
                "latitude": 50.45,
                "longitude": 30.52,
                "country": "Ukraine",
                "country_code": "UA",
            }
        ]
    }


@pytest.fixture()
def open_meteo_current_payload() -> dict:
    return {
        "latitude": 50.45,
        "longitude": 30.52,
        "current": {
            "time": 1700000000,
            "temperature_2m": 12.34,
            "relative_humidity_2m": 65,
            "apparent_temperature": 10.06,
            "pressure_msl": 1012.6,
            "wind_speed_10m": 3.46,
            "weather_code": 63,
        },
    }


@pytest.fixture()
def open_meteo_daily_payload() -> dict:
    return {
        "daily": {
            "time": ["2024-05-01", "2024-05-02", "2024-05-03", "2024-05-04", "2024-05-05"],
            "temperature_2m_max": [20.14, 18.0, 22.5, 25.01, 19.9],
            "temperature_2m_min": [10.04, 9.5, 12.0, 14.26, 8.1],
            "weather_code": [0, 3, 61, 95, 200],
        }
    }


@pytest.fixture()
def openweather_current_payload() -> dict:
    return {
        "name": "Kyiv",
        "sys": {"country": "UA"},
        "main": {"temp": 285.15, "feels_like": 283.65, "humidity": 71, "pressure": 1009},
        "wind": {"speed": 4.12},
        "weather": [{"id": 500, "description": "light rain", "icon": "10d"}],
        "dt": 1700000000,
    }


@pytest.fixture()
def openweather_forecast_payload() -> dict:
    def entry(offset_hours: int, temp: float, humidity: int, pressure: int, description: str | None) -> dict:
        item = {
            "dt": MAY_FIRST_UTC + offset_hours * 3600,
            "main": {"temp": temp, "feels_like": temp, "humidity": humidity, "pressure": pressure},
            "wind": {"speed": 3.0},
        }
        if description is not None:
            item["weather"] = [{"description": description, "icon": "10d"}]
        return item

    return {
        "cnt": 5,
        "list": [
            entry(24, 290.15, 50, 1011, "clear sky"),
            entry(0, 280.15, 60, 1010, "light rain"),
            entry(3, 285.15, 70, 1012, "clear sky"),
            entry(6, 283.15, 80, 1015, "light rain"),
            entry(27, 288.15, 56, 1013, None),
        ],
    }
