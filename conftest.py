from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


# Explicit values win over a developer's .env, so tests always hit the public URLs.
TEST_ENVIRONMENT = {
    "DJANGO_SECRET_KEY": "test-secret",
    "DJANGO_SETTINGS_MODULE": "weatherapi.settings",
    "OPENWEATHER_API_KEY": "test-key",
    "OPENWEATHER_BASE_URL": "https://api.openweathermap.org/data/2.5",
    "OPENMETEO_BASE_URL": "https://api.open-meteo.com/v1",
    "GEOCODING_URL": "https://geocoding-api.open-meteo.com/v1/search",
    "WEATHER_LANGUAGE": "en",
    "APP_TIMEZONE": "UTC",
}

for _name, _value in TEST_ENVIRONMENT.items():
    os.environ[_name] = _value

django.setup()


@pytest.fixture()
def requests_mock():
    """Stub every upstream call; unmatched URLs raise ``NoMockAddress``."""
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def fresh_weather_service():
    from weatherapi.api.views import get_weather_service

    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()
