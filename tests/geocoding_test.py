from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from weatherapi.core.errors import NotFoundError, UpstreamError
from weatherapi.core.geocoding import GeocodingResolver


GEOCODING_URL = "https://geocoding.test/v1/search"


def _query(call) -> dict:
    return {key: values[0] for key, values in parse_qs(urlparse(call.request.url).query).items()}


def test_resolve_returns_first_result(geocoding_payload):
    resolver = GeocodingResolver(base_url=GEOCODING_URL)

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, json=geocoding_payload, status=200)
        place = resolver.resolve("Kyiv", "UA")

        assert len(rsps.calls) == 1
        query = _query(rsps.calls[0])

    assert query["name"] == "Kyiv, UA"
    assert query["count"] == "1"
    assert query["language"] == "en"
    assert place.name == "Kyiv"
    assert place.country == "Ukraine"
    assert place.country_code == "UA"
    assert (place.coordinates.latitude, place.coordinates.longitude) == (50.45, 30.52)


def test_resolve_without_country_queries_city_only(geocoding_payload):
    resolver = GeocodingResolver(base_url=GEOCODING_URL, language="uk")

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, json=geocoding_payload, status=200)
        resolver.resolve("Kyiv")
        query = _query(rsps.calls[0])

    assert query["name"] == "Kyiv"
    assert query["language"] == "uk"


def test_resolve_raises_not_found_on_empty_results():
    resolver = GeocodingResolver(base_url=GEOCODING_URL)

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, json={"generationtime_ms": 0.5}, status=200)
        with pytest.raises(NotFoundError, match="City 'Atlantis' not found"):
            resolver.resolve("Atlantis")


def test_resolve_wraps_http_failures():
    resolver = GeocodingResolver(base_url=GEOCODING_URL)

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, body="bad gateway", status=502)
        with pytest.raises(UpstreamError) as excinfo:
            resolver.resolve("Kyiv")

    assert excinfo.value.status_code == 502


def test_resolve_wraps_transport_failures():
    resolver = GeocodingResolver(base_url=GEOCODING_URL)

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, body=requests.ConnectionError("connection refused"))
        with pytest.raises(UpstreamError):
            resolver.resolve("Kyiv")


def test_resolve_maps_timeouts_to_upstream_error():
    resolver = GeocodingResolver(base_url=GEOCODING_URL)

    with responses.RequestsMock() as rsps:
        rsps.add("GET", GEOCODING_URL, body=requests.Timeout("read timed out"))
        with pytest.raises(UpstreamError, match="timeout"):
            resolver.resolve("Kyiv")
