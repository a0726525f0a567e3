# ABOUTME: Shared test fixtures for the weather reporter test suite.
# ABOUTME: Provides sample locations, a sample measurement, and an Open-Meteo current-weather payload.

import pytest

from weather_reporter.models import Location, Reading, WeatherMeasurement


@pytest.fixture
def london_uk() -> Location:
    return Location(id=2643743, name="London", latitude=51.50853, longitude=-0.12574, country="United Kingdom", region="England")


@pytest.fixture
def london_canada() -> Location:
    return Location(id=6058560, name="London", latitude=42.98339, longitude=-81.23304, country="Canada", region="Ontario")


@pytest.fixture
def measurement() -> WeatherMeasurement:
    return WeatherMeasurement(
        temperature=Reading(value=20.1, unit="°C"),
        relative_humidity=Reading(value=50, unit="%"),
        apparent_temperature=Reading(value=18.4, unit="°C"),
        precipitation=Reading(value=0.0, unit="mm"),
        cloud_cover=Reading(value=10, unit="%"),
        surface_pressure=Reading(value=1013.2, unit="hPa"),
        wind_speed=Reading(value=10.8, unit="km/h"),
        wind_direction=Reading(value=270, unit="°"),
        wind_gusts=Reading(value=15.5, unit="km/h"),
    )


@pytest.fixture
def current_weather_payload() -> dict:
    return {
        "latitude": 51.5,
        "longitude": -0.120000124,
        "current_units": {
            "time": "iso8601",
            "interval": "seconds",
            "temperature_2m": "°C",
            "relative_humidity_2m": "%",
            "apparent_temperature": "°C",
            "precipitation": "mm",
            "cloud_cover": "%",
            "surface_pressure": "hPa",
            "wind_speed_10m": "km/h",
            "wind_direction_10m": "°",
            "wind_gusts_10m": "km/h",
        },
        "current": {
            "time": "2025-01-15T12:00",
            "interval": 900,
            "temperature_2m": 7.3,
            "relative_humidity_2m": 81,
            "apparent_temperature": 4.2,
            "precipitation": 0.1,
            "cloud_cover": 100,
            "surface_pressure": 1003.6,
            "wind_speed_10m": 14.2,
            "wind_direction_10m": 236,
            "wind_gusts_10m": 31.3,
        },
    }
