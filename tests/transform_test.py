from __future__ import annotations

import pytest

from weatherapi.core.entities import FilterOptions, ForecastDay
from weatherapi.core.transform import FilterTransformer


@pytest.fixture()
def record() -> dict:
    return {
        "city": "Kyiv",
        "country": "Ukraine",
        "temperature": 20.0,
        "feels_like": 15.0,
        "humidity": 50,
        "pressure": 1013,
        "wind_speed": 10.0,
        "description": "clear sky",
        "icon": "01d",
        "timestamp": 1700000000,
        "formatted_time": "2023-11-14 22:13:20",
    }


def test_projection_keeps_only_requested_fields(record) -> None:
    options = FilterOptions.from_query({"fields": "city,temperature", "wind_unit": "mph", "pressure_unit": "inHg"})

    result = FilterTransformer().apply(record, options)

    assert set(result) == {"city", "temperature"}


def test_projection_ignores_unknown_fields(record) -> None:
    options = FilterOptions.from_query({"fields": "city, nonexistent"})

    assert FilterTransformer().apply(record, options) == {"city": "Kyiv"}


def test_fahrenheit_conversion(record) -> None:
    result = FilterTransformer().apply(record, FilterOptions(temperature_unit="fahrenheit"))

    assert result["temperature"] == 68.0
    assert result["feels_like"] == 59.0


def test_wind_and_pressure_conversion(record) -> None:
    options = FilterOptions(wind_unit="mph", pressure_unit="inHg")

    result = FilterTransformer().apply(record, options)

    assert result["wind_speed"] == 22.4
    assert result["pressure"] == 29.91


def test_computed_categories(record) -> None:
    record.update(temperature=25, humidity=50, wind_speed=10)

    result = FilterTransformer().apply(record, FilterOptions(include_computed=True))

    assert result["temperature_category"] == "warm"
    assert result["humidity_category"] == "comfortable"
    assert result["wind_category"] == "light"


def test_computed_fields_survive_projection(record) -> None:
    options = FilterOptions(fields=frozenset({"city"}), include_computed=True)

    result = FilterTransformer().apply(record, options)

    assert result["city"] == "Kyiv"
    assert result["temperature_category"] == "cold"  # temperature projected away, counts as 0
    assert result["humidity_category"] == "dry"
    assert result["wind_category"] == "calm"


def test_temperature_category_uses_converted_value(record) -> None:
    options = FilterOptions(temperature_unit="fahrenheit", include_computed=True)

    result = FilterTransformer().apply(record, options)

    assert result["temperature"] == 68.0
    assert result["temperature_category"] == "hot"


@pytest.mark.parametrize(
    "temperature, expected",
    [(-0.1, "freezing"), (0, "cold"), (9.9, "cold"), (10, "cool"), (20, "warm"), (29.9, "warm"), (30, "hot")],
)
def test_temperature_thresholds(record, temperature, expected) -> None:
    record["temperature"] = temperature

    result = FilterTransformer().apply(record, FilterOptions(include_computed=True))

    assert result["temperature_category"] == expected


def test_input_record_is_not_mutated(record) -> None:
    original = dict(record)

    FilterTransformer().apply(record, FilterOptions(temperature_unit="fahrenheit", include_computed=True))

    assert record == original


def test_forecast_is_keyed_by_date_with_fahrenheit() -> None:
    days = [
        ForecastDay("2024-05-01", 10.0, 20.0, 70, 1013, "clear sky", ("clear sky",), 1),
        ForecastDay("2024-05-02", -5.0, 0.0, 70, 1013, "overcast", ("overcast",), 1),
    ]

    result = FilterTransformer().apply_forecast(days, FilterOptions(temperature_unit="fahrenheit"))

    assert list(result) == ["2024-05-01", "2024-05-02"]
    assert result["2024-05-01"]["min_temp"] == 50.0
    assert result["2024-05-01"]["max_temp"] == 68.0
    assert result["2024-05-02"]["min_temp"] == 23.0
    assert result["2024-05-02"]["conditions"] == ["overcast"]


def test_filter_options_from_query_defaults() -> None:
    options = FilterOptions.from_query({})

    assert options == FilterOptions()


def test_filter_options_include_computed_flag() -> None:
    assert FilterOptions.from_query({}).include_computed is False
    assert FilterOptions.from_query({"include_computed": ""}).include_computed is True
    assert FilterOptions.from_query({"include_computed": "true"}).include_computed is True
    assert FilterOptions.from_query({"include_computed": "false"}).include_computed is True


def test_filter_options_unknown_units_keep_defaults() -> None:
    options = FilterOptions.from_query(
        {"temperature_unit": "Fahrenheit", "wind_unit": "knots", "pressure_unit": "mmHg"}
    )

    assert (options.temperature_unit, options.wind_unit, options.pressure_unit) == ("celsius", "ms", "hPa")
