from __future__ import annotations

from django.apps import AppConfig


class WeatherApiConfig(AppConfig):
    name = "weatherapi.api"
    label = "weather_api"
