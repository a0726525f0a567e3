# ABOUTME: Location search adapter for the Open-Meteo geocoding API.
# ABOUTME: Returns ordered Location candidates and normalizes upstream failures into ProviderErrors.

import logging

import httpx

from weather_reporter.deadline import Deadline
from weather_reporter.errors import COMMON_RULES, ClassificationRule, ErrorKind, has_status, normalized_errors
from weather_reporter.models import Location

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
SEARCH_LANGUAGE = "en"
MAX_CANDIDATES = 10

# Open-Meteo answers 400 when it rejects the name parameter.
GEOCODING_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(ErrorKind.INVALID_QUERY, (httpx.HTTPStatusError,), has_status(400)),
    *COMMON_RULES,
    ClassificationRule(ErrorKind.UNAVAILABLE, (ValueError, KeyError, TypeError)),
)


class OpenMeteoGeocoder:
    """LocationProvider backed by the Open-Meteo geocoding search endpoint."""

    operation = "location search"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = GEOCODING_URL):
        self._client = http_client
        self._url = base_url

    async def search(self, query: str, deadline: Deadline) -> list[Location]:
        with normalized_errors(self.operation, GEOCODING_RULES):
            logger.debug("Searching locations for %r", query)
            async with deadline.scope():
                resp = await self._client.get(
                    self._url,
                    params={"name": query, "count": MAX_CANDIDATES, "language": SEARCH_LANGUAGE, "format": "json"},
                )
            resp.raise_for_status()
            return parse_search_results(resp.json())


def parse_search_results(data: dict) -> list[Location]:
    """Convert a geocoding search payload into Locations, keeping the provider's order."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")

    results = data.get("results") or []
    return [Location.model_validate(r) for r in results]
