# ABOUTME: Runtime settings read from the environment and an optional .env file.
# ABOUTME: Validated with pydantic so bad values fail before any network call.

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from weather_reporter.deps import DEFAULT_REQUEST_TIMEOUT
from weather_reporter.geocoding import GEOCODING_URL
from weather_reporter.pipeline import DEFAULT_RUN_TIMEOUT
from weather_reporter.weather_service import FORECAST_URL

ENV_PREFIX = "WEATHER_REPORTER_"


class Settings(BaseModel):
    """Tunable values for a single CLI run."""

    timeout_seconds: float = Field(default=DEFAULT_RUN_TIMEOUT, gt=0)
    request_timeout_seconds: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


_ENV_FIELDS = {
    "TIMEOUT": "timeout_seconds",
    "REQUEST_TIMEOUT": "request_timeout_seconds",
    "GEOCODING_URL": "geocoding_url",
    "FORECAST_URL": "forecast_url",
    "LOG_LEVEL": "log_level",
}


def load_settings() -> Settings:
    """Build Settings from WEATHER_REPORTER_* variables, after loading a .env from the working directory."""
    load_dotenv(find_dotenv(usecwd=True))
    values = {}
    for suffix, field in _ENV_FIELDS.items():
        raw = os.environ.get(ENV_PREFIX + suffix)
        if raw:
            values[field] = raw
    return Settings(**values)
