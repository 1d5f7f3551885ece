from __future__ import annotations

from weatherapi.core.catalogs import LEGACY, OPEN_METEO, catalog_for


def test_open_meteo_descriptions_and_icon_buckets() -> None:
    assert OPEN_METEO.description(0) == "clear sky"
    assert OPEN_METEO.description(95) == "thunderstorm"
    assert {OPEN_METEO.icon(code) for code in (61, 63, 65)} == {"10d"}
    assert OPEN_METEO.lookup(45) == ("fog", "50d")


def test_unknown_codes_fall_back_to_sentinels() -> None:
    assert OPEN_METEO.lookup(1234) == ("unknown", "01d")
    assert OPEN_METEO.lookup(None) == ("unknown", "01d")
    assert LEGACY.lookup(-7) == ("unknown", "01d")


def test_legacy_catalog_is_independent() -> None:
    assert LEGACY.description(0) == "Ясно"
    assert LEGACY.description(5) == "Туман"
    assert OPEN_METEO.description(5) == "unknown"
    assert LEGACY.icon(5) == "50d"


def test_catalog_for_language() -> None:
    assert catalog_for("uk") is LEGACY
    assert catalog_for("en") is OPEN_METEO
    assert catalog_for("") is OPEN_METEO
