"""Weather service that tries the primary provider, then the fallback one."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from ..catalogs import OPEN_METEO, WeatherCodeCatalog, catalog_for
from ..config import WeatherConfig
from ..entities import ForecastDay, Location, RawWeather, WeatherSnapshot
from ..errors import BothProvidersFailedError, QuotaExceeded
from ..geocoding import GeocodingResolver
from ..normalizer import normalize_current, normalize_forecast
from ..providers.base import RequestConfig, WeatherProvider
from ..providers.openmeteo import OpenMeteoProvider
from ..providers.openweather import OpenWeatherProvider


T = TypeVar("T")


class WeatherService:
    MAX_FORECAST_DAYS = 16

    def __init__(
        self,
        *,
        primary_provider: WeatherProvider,
        fallback_provider: WeatherProvider,
        catalog: WeatherCodeCatalog = OPEN_METEO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.primary = primary_provider
        self.fallback = fallback_provider
        self.catalog = catalog
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: WeatherConfig) -> "WeatherService":
        request_config = RequestConfig(timeout=config.http_timeout)
        geocoder = GeocodingResolver(
            base_url=config.geocoding_url,
            language=config.language,
            request_config=request_config,
        )
        primary = OpenMeteoProvider(
            geocoder,
            base_url=config.openmeteo_base_url,
            request_config=request_config,
        )
        fallback = OpenWeatherProvider(
            api_key=config.openweather_api_key,
            base_url=config.openweather_base_url,
            request_config=request_config,
        )
        return cls(primary_provider=primary, fallback_provider=fallback, catalog=catalog_for(config.language))

    # Public API ---------------------------------------------------------
    def get_current(self, location: Location) -> WeatherSnapshot:
        return self._fetch_with_fallback(
            lambda provider: normalize_current(provider.current(location), self.catalog),
            headline="Failed to fetch weather data",
            context=location.log_context(),
        )

    def get_forecast(self, location: Location, days: int) -> List[ForecastDay]:
        def fetch(provider: WeatherProvider) -> List[ForecastDay]:
            raw: RawWeather = provider.forecast(location, days)
            return normalize_forecast(raw, days, self.catalog)

        return self._fetch_with_fallback(
            fetch,
            headline="Failed to fetch weather forecast",
            context={**location.log_context(), "days": days},
        )

    # Helpers ------------------------------------------------------------
    def _fetch_with_fallback(self, fetch: Callable[[WeatherProvider], T], *, headline: str, context: dict) -> T:
        try:
            return fetch(self.primary)
        except Exception as primary_error:  # noqa: BLE001 - any primary failure moves on to the fallback
            self._log_failure(self.primary, primary_error, context)
            try:
                result = fetch(self.fallback)
            except Exception as fallback_error:  # noqa: BLE001 - reported together with the primary error
                self._log.error(
                    "%s (both providers failed)",
                    headline,
                    extra={
                        **context,
                        "primary_error": str(primary_error),
                        "fallback_error": str(fallback_error),
                    },
                )
                raise BothProvidersFailedError(headline, primary_error, fallback_error) from primary_error
            self._log.info("Served by fallback provider %s", _name(self.fallback), extra=context)
            return result

    def _log_failure(self, provider: WeatherProvider, exc: Exception, context: dict) -> None:
        if isinstance(exc, QuotaExceeded):
            self._log.warning("Provider %s quota exceeded", _name(provider), extra=context)
            return
        self._log.error("Provider %s failed: %s", _name(provider), exc, extra=context)


def _name(provider: WeatherProvider) -> str:
    return getattr(provider, "name", provider.__class__.__name__)


__all__ = ["WeatherService"]
