# ABOUTME: Provider contracts and the dependency container handed to the pipeline.
# ABOUTME: Also builds the httpx.AsyncClient each Open-Meteo adapter owns.

from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict

from weather_reporter.deadline import Deadline
from weather_reporter.models import Location, WeatherMeasurement

DEFAULT_REQUEST_TIMEOUT = 10.0
USER_AGENT = "weather-reporter"


@runtime_checkable
class LocationProvider(Protocol):
    async def search(self, query: str, deadline: Deadline) -> list[Location]:
        """Return candidates in relevance order; an empty list means no match.

        Raises ProviderError on failure. Makes exactly one outbound call and never retries.
        """
        ...


@runtime_checkable
class WeatherProvider(Protocol):
    async def get_current_weather(self, latitude: float, longitude: float, deadline: Deadline) -> WeatherMeasurement:
        """Return current conditions for the coordinates. Raises ProviderError on failure."""
        ...


class ReporterDeps(BaseModel):
    """Providers injected into a pipeline run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    geocoding: LocationProvider
    weather: WeatherProvider


def create_http_client(timeout: float = DEFAULT_REQUEST_TIMEOUT) -> httpx.AsyncClient:
    """Create an httpx client with a per-request timeout and no retry transport.

    Failures surface on the first attempt; the caller decides whether to run again.
    """
    return httpx.AsyncClient(timeout=timeout, headers={"User-Agent": USER_AGENT})
