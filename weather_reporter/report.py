# ABOUTME: Plain-text rendering of the current weather report.
# ABOUTME: Fixed field order and labels; units come from the measurement itself.

from typing import TextIO

from weather_reporter.models import Location, WeatherMeasurement

SEPARATOR = "-" * 48
LABEL_WIDTH = 22

REPORT_FIELDS = (
    ("Temperature", "temperature"),
    ("Apparent Temperature", "apparent_temperature"),
    ("Humidity", "relative_humidity"),
    ("Precipitation", "precipitation"),
    ("Cloud Cover", "cloud_cover"),
    ("Pressure", "surface_pressure"),
    ("Wind Speed", "wind_speed"),
    ("Wind Direction", "wind_direction"),
    ("Wind Gusts", "wind_gusts"),
)


def render_report(location: Location, measurement: WeatherMeasurement) -> str:
    lines = [f"Weather for {location.label}", SEPARATOR]
    for label, field in REPORT_FIELDS:
        lines.append(f"{label + ':':<{LABEL_WIDTH}}{getattr(measurement, field)}")
    return "\n".join(lines) + "\n"


def print_report(out: TextIO, location: Location, measurement: WeatherMeasurement):
    """Write the rendered report to out. Write errors propagate to the caller."""
    out.write(render_report(location, measurement))
    out.flush()
