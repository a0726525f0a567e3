# ABOUTME: Contract tests for the Pydantic models used for locations and weather readings.
# ABOUTME: Validates coordinate bounds, provider field aliases, immutability, and display labels.

import pytest
from pydantic import ValidationError

from weather_reporter.models import Location, NoMatch, Reading, Resolved


class TestLocation:
    def test_parses_geocoding_result(self):
        """Location accepts a raw Open-Meteo search result.

        Implementation: Validates a dict shaped like a geocoding result, including extra keys.
        Passing implies: admin1 maps onto region and unrelated provider fields are ignored.
        """
        loc = Location.model_validate(
            {
                "id": 2643743,
                "name": "London",
                "latitude": 51.50853,
                "longitude": -0.12574,
                "elevation": 25.0,
                "country": "United Kingdom",
                "admin1": "England",
                "timezone": "Europe/London",
            }
        )
        assert loc.id == 2643743
        assert loc.region == "England"
        assert loc.latitude == 51.50853
        assert loc.longitude == -0.12574

    def test_country_and_region_are_optional(self):
        """Location defaults missing country and region to empty strings.

        Implementation: Constructs a Location with only id, name and coordinates.
        Passing implies: Providers that omit administrative areas still produce Locations.
        """
        loc = Location(id=1, name="Atlantis", latitude=0.0, longitude=0.0)
        assert loc.country == ""
        assert loc.region == ""

    @pytest.mark.parametrize("lat,lon", [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)])
    def test_rejects_out_of_range_coordinates(self, lat, lon):
        """Location refuses coordinates outside the valid latitude/longitude ranges.

        Implementation: Constructs Locations just past each bound.
        Passing implies: Any Location handed to a weather provider has valid coordinates.
        """
        with pytest.raises(ValidationError):
            Location(id=1, name="Nowhere", latitude=lat, longitude=lon)

    def test_is_immutable(self, london_uk):
        """Location cannot be modified after construction.

        Implementation: Attempts to assign a new latitude.
        Passing implies: Resolved coordinates reach the weather provider unchanged.
        """
        with pytest.raises(ValidationError):
            london_uk.latitude = 0.0

    def test_label_includes_region(self, london_canada):
        """label renders name, country and region in parentheses."""
        assert london_canada.label == "London, Canada (Ontario)"

    def test_label_keeps_parentheses_for_empty_region(self):
        """label keeps the fixed "<name>, <country> (<region>)" shape even without a region."""
        loc = Location(id=1, name="Monaco", latitude=43.73, longitude=7.42, country="Monaco")
        assert loc.label == "Monaco, Monaco ()"


class TestReading:
    def test_degree_units_attach_to_value(self):
        """Degree units follow the value directly."""
        assert str(Reading(value=20.1, unit="°C")) == "20.1°C"
        assert str(Reading(value=270, unit="°")) == "270°"

    @pytest.mark.parametrize(
        "value,unit,expected",
        [(1013.2, "hPa", "1013.2 hPa"), (10.8, "km/h", "10.8 km/h"), (0.0, "mm", "0.0 mm")],
    )
    def test_word_units_are_spaced(self, value, unit, expected):
        """Letter units are separated from the value by one space.

        Implementation: Renders pressure, wind speed and precipitation readings.
        Passing implies: Report lines read "1013.2 hPa" rather than "1013.2hPa".
        """
        assert str(Reading(value=value, unit=unit)) == expected

    def test_integer_values_stay_integers(self):
        """Reading keeps integral provider values as ints.

        Implementation: Builds a humidity reading from an int.
        Passing implies: Percentages print as "81%" rather than "81.0%".
        """
        assert str(Reading(value=81, unit="%")) == "81%"

    def test_rejects_missing_value(self):
        """Reading requires a numeric value."""
        with pytest.raises(ValidationError):
            Reading(value=None, unit="°C")


class TestResolution:
    def test_resolved_wraps_location(self, london_uk):
        """Resolved carries the chosen Location unchanged."""
        assert Resolved(location=london_uk).location == london_uk

    def test_no_match_has_no_location(self):
        """NoMatch is a distinct outcome with no payload."""
        assert not hasattr(NoMatch(), "location")
