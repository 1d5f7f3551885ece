from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import requests
from requests import Response

from ..entities import Location, RawWeather
from ..errors import QuotaExceeded, UpstreamError


@dataclass
class RequestConfig:
    timeout: float = 10.0


class HttpClient:
    """Base class that adds timeouts and error mapping for HTTP upstreams."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("API request failed: quota exceeded", status_code=429)
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:500])
            raise UpstreamError(
                f"API request failed: {self._error_detail(response)}",
                status_code=response.status_code,
            )
        return response

    def _error_detail(self, response: Response) -> str:
        return f"HTTP {response.status_code}"

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise UpstreamError("API request failed: timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise UpstreamError(f"API request failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamError("API request failed: invalid json") from exc


class WeatherProvider(Protocol):
    """A weather data source returning raw, provider-shaped payloads."""

    name: str

    def current(self, location: Location) -> RawWeather:
        """Fetch current weather for a named place or coordinates."""
        ...

    def forecast(self, location: Location, days: int) -> RawWeather:
        """Fetch a forecast covering ``days`` calendar days."""
        ...


__all__ = ["HttpClient", "RequestConfig", "WeatherProvider"]
