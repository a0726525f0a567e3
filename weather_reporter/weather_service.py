# ABOUTME: Current-weather adapter for the Open-Meteo forecast API.
# ABOUTME: Parses the "current" block and its units into a WeatherMeasurement.

import logging

import httpx

from weather_reporter.deadline import Deadline
from weather_reporter.errors import COMMON_RULES, ClassificationRule, ErrorKind, normalized_errors
from weather_reporter.models import Reading, WeatherMeasurement

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

# WeatherMeasurement field -> Open-Meteo "current" variable
CURRENT_FIELDS = {
    "temperature": "temperature_2m",
    "relative_humidity": "relative_humidity_2m",
    "apparent_temperature": "apparent_temperature",
    "precipitation": "precipitation",
    "cloud_cover": "cloud_cover",
    "surface_pressure": "surface_pressure",
    "wind_speed": "wind_speed_10m",
    "wind_direction": "wind_direction_10m",
    "wind_gusts": "wind_gusts_10m",
}

CURRENT_PARAMS = ",".join(CURRENT_FIELDS.values())

# JSON decode and pydantic validation errors are both ValueErrors.
WEATHER_RULES: tuple[ClassificationRule, ...] = (
    *COMMON_RULES,
    ClassificationRule(ErrorKind.MALFORMED_RESPONSE, (ValueError, KeyError, TypeError)),
)


class OpenMeteoWeather:
    """WeatherProvider backed by the Open-Meteo forecast endpoint."""

    operation = "weather request"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = FORECAST_URL):
        self._client = http_client
        self._url = base_url

    async def get_current_weather(self, latitude: float, longitude: float, deadline: Deadline) -> WeatherMeasurement:
        with normalized_errors(self.operation, WEATHER_RULES):
            logger.debug("Fetching current weather for %s,%s", latitude, longitude)
            async with deadline.scope():
                resp = await self._client.get(
                    self._url,
                    params={"latitude": latitude, "longitude": longitude, "current": CURRENT_PARAMS},
                )
            resp.raise_for_status()
            return parse_current_weather(resp.json())


def parse_current_weather(data: dict) -> WeatherMeasurement:
    """Pair each Open-Meteo current value with its unit from current_units."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")

    current = data["current"]
    units = data["current_units"]
    readings = {
        field: Reading(value=current[key], unit=units[key])
        for field, key in CURRENT_FIELDS.items()
    }
    return WeatherMeasurement(**readings)
