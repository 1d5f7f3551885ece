"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weatherapi.api.views import CoordinatesWeatherView, ForecastView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("weather/coordinates", CoordinatesWeatherView.as_view(), name="weather-coordinates"),
    path("weather/forecast", ForecastView.as_view(), name="weather-forecast"),
]
