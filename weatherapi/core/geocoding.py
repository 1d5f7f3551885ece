"""Place name to coordinates resolution backed by the Open-Meteo geocoder."""
from __future__ import annotations

from typing import Optional

from .entities import Coordinates, PlaceResolution
from .errors import NotFoundError, UpstreamError
from .providers.base import HttpClient


class GeocodingResolver(HttpClient):
    base_url = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, base_url: Optional[str] = None, language: str = "en", **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.language = language

    def resolve(self, city: str, country: Optional[str] = None) -> PlaceResolution:
        """Return the best match for ``city`` (optionally within ``country``).

        Raises :class:`NotFoundError` when the provider has no match and
        :class:`UpstreamError` when the provider cannot be reached.
        """
        query = f"{city}, {country}" if country else city
        params = {"name": query, "count": 1, "language": self.language, "format": "json"}
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response) or {}
        results = data.get("results") or []
        if not results:
            raise NotFoundError(f"City '{city}' not found")

        result = results[0]
        try:
            coordinates = Coordinates(latitude=float(result["latitude"]), longitude=float(result["longitude"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError("API request failed: malformed geocoding result") from exc
        self._log.debug("Resolved %r to %s", query, coordinates)
        return PlaceResolution(
            coordinates=coordinates,
            name=result.get("name") or city,
            country=result.get("country") or country or "",
            country_code=result.get("country_code") or "",
        )


__all__ = ["GeocodingResolver"]
