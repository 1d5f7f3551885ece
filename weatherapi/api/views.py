"""REST API views for weather information."""
from __future__ import annotations

from functools import lru_cache
from typing import Mapping

from django.http import JsonResponse
from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from weatherapi.api.envelope import error_payload, success_response
from weatherapi.core.config import WeatherConfig
from weatherapi.core.entities import Coordinates, FilterOptions, Location
from weatherapi.core.errors import ValidationError
from weatherapi.core.services.weather import WeatherService
from weatherapi.core.transform import FilterTransformer


DEFAULT_FORECAST_DAYS = 5


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    return WeatherService.from_config(WeatherConfig.from_settings())


def parse_coordinates(params: Mapping[str, str]) -> Coordinates:
    lat = (params.get("lat") or "").strip()
    lon = (params.get("lon") or "").strip()
    if not lat or not lon:
        raise ValidationError("Latitude and longitude parameters are required")
    try:
        latitude, longitude = float(lat), float(lon)
    except ValueError:
        raise ValidationError("Latitude and longitude must be numeric") from None
    return Coordinates.validated(latitude, longitude)


def parse_days(params: Mapping[str, str]) -> int:
    raw = params.get("days")
    if raw is None or raw == "":
        return DEFAULT_FORECAST_DAYS
    try:
        days = int(raw)
    except ValueError:
        days = 0
    if not 1 <= days <= WeatherService.MAX_FORECAST_DAYS:
        raise ValidationError(f"Days parameter must be between 1 and {WeatherService.MAX_FORECAST_DAYS}")
    return days


class _WeatherAPIView(APIView):
    permission_classes = [AllowAny]
    http_method_names = ["get", "options"]
    transformer = FilterTransformer()

    def current_response(self, location: Location, options: FilterOptions):
        snapshot = get_weather_service().get_current(location)
        record = snapshot.as_dict(tz=timezone.get_current_timezone())
        return success_response(self.transformer.apply(record, options))


class WeatherView(_WeatherAPIView):
    """Current weather for a named place."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the current weather for ``city`` (and optional ``country``)."""
        params = request.query_params
        location = Location.for_city(params.get("city", ""), params.get("country"))
        options = FilterOptions.from_query(params)
        return self.current_response(location, options)


class CoordinatesWeatherView(_WeatherAPIView):
    """Current weather for explicit coordinates."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the current weather for ``lat``/``lon``."""
        params = request.query_params
        location = Location.for_coordinates(parse_coordinates(params))
        options = FilterOptions.from_query(params)
        return self.current_response(location, options)


class ForecastView(_WeatherAPIView):
    """Daily forecast for a named place."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return a forecast keyed by date, ascending."""
        params = request.query_params
        location = Location.for_city(params.get("city", ""), params.get("country"))
        days = parse_days(params)
        options = FilterOptions.from_query(params)
        forecast = get_weather_service().get_forecast(location, days)
        return success_response(self.transformer.apply_forecast(forecast, options))


def not_found(request, exception=None):
    return JsonResponse(error_payload("Endpoint not found"), status=404, json_dumps_params={"ensure_ascii": False})
