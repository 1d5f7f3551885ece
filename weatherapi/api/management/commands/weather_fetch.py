"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from weatherapi.api.views import get_weather_service
from weatherapi.core.entities import Coordinates, FilterOptions, Location
from weatherapi.core.errors import ValidationError, WeatherError
from weatherapi.core.services.weather import WeatherService
from weatherapi.core.transform import FilterTransformer


class Command(BaseCommand):
    help = "Fetch current weather or a forecast for a city or coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, help="City name")
        parser.add_argument("--country", type=str, help="Country name or code")
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--forecast", action="store_true", help="Fetch a daily forecast (city only)")
        parser.add_argument("--days", type=int, default=5, help="Forecast length in days (1-16)")
        parser.add_argument("--fields", type=str, help="Comma separated list of fields to keep")
        parser.add_argument("--temperature-unit", choices=("celsius", "fahrenheit"), default="celsius")
        parser.add_argument("--wind-unit", choices=("ms", "mph"), default="ms")
        parser.add_argument("--pressure-unit", choices=("hPa", "inHg"), default="hPa")
        parser.add_argument("--include-computed", action="store_true", help="Add categorical fields")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        filters = FilterOptions.from_query(
            {
                "fields": options.get("fields") or "",
                "temperature_unit": options["temperature_unit"],
                "wind_unit": options["wind_unit"],
                "pressure_unit": options["pressure_unit"],
                **({"include_computed": "1"} if options.get("include_computed") else {}),
            }
        )
        transformer = FilterTransformer()

        try:
            location = self._location(options)
            if options.get("forecast"):
                days = options["days"]
                if location.is_coordinates:
                    raise ValidationError("--forecast requires --city")
                if not 1 <= days <= WeatherService.MAX_FORECAST_DAYS:
                    raise ValidationError(f"--days must be between 1 and {WeatherService.MAX_FORECAST_DAYS}")
                forecast = get_weather_service().get_forecast(location, days)
                payload: Any = transformer.apply_forecast(forecast, filters)
            else:
                snapshot = get_weather_service().get_current(location)
                record = snapshot.as_dict(tz=timezone.get_current_timezone())
                payload = transformer.apply(record, filters)
        except WeatherError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(payload, ensure_ascii=False))

    def _location(self, options: Any) -> Location:
        if options.get("city"):
            return Location.for_city(options["city"], options.get("country"))
        latitude = options.get("lat")
        longitude = options.get("lon")
        if latitude is None or longitude is None:
            raise ValidationError("--city or both --lat and --lon are required")
        return Location.for_coordinates(Coordinates.validated(latitude, longitude))
