# ABOUTME: Pydantic BaseModels for geocoded locations and current weather readings.
# ABOUTME: Also defines the resolution outcomes produced by location disambiguation.

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Geocoded location returned by a provider search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    country: str = ""
    region: str = Field(default="", alias="admin1")

    @property
    def label(self) -> str:
        """Display form used in candidate listings and the report header."""
        return f"{self.name}, {self.country} ({self.region})"


class Reading(BaseModel):
    """A single measured value together with its display unit."""

    model_config = ConfigDict(frozen=True)

    value: int | float
    unit: str

    def __str__(self) -> str:
        # Degree and percent signs attach to the number; other units are spaced.
        if not self.unit or self.unit.startswith("°") or self.unit == "%":
            return f"{self.value}{self.unit}"
        return f"{self.value} {self.unit}"


class WeatherMeasurement(BaseModel):
    """Current conditions at a location, in the provider's metric units."""

    model_config = ConfigDict(frozen=True)

    temperature: Reading
    relative_humidity: Reading
    apparent_temperature: Reading
    precipitation: Reading
    cloud_cover: Reading
    surface_pressure: Reading
    wind_speed: Reading
    wind_direction: Reading
    wind_gusts: Reading


class NoMatch(BaseModel):
    """The search returned no candidates."""

    model_config = ConfigDict(frozen=True)


class Resolved(BaseModel):
    """Disambiguation settled on exactly one location."""

    model_config = ConfigDict(frozen=True)

    location: Location


Resolution = NoMatch | Resolved
