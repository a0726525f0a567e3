# ABOUTME: Command-line entry point: parses arguments, configures logging, runs the pipeline.
# ABOUTME: Detects whether stdin is a terminal and wires the Open-Meteo adapters into ReporterDeps.

import argparse
import asyncio
import logging
import sys
from contextlib import AsyncExitStack
from typing import TextIO

from pydantic import ValidationError

from weather_reporter import __build_date__, __commit__, __version__
from weather_reporter.config import Settings, load_settings
from weather_reporter.deps import ReporterDeps, create_http_client
from weather_reporter.geocoding import OpenMeteoGeocoder
from weather_reporter.pipeline import EXIT_FAILURE, EXIT_OK, run_pipeline
from weather_reporter.weather_service import OpenMeteoWeather

PROG = "weather-reporter"
USAGE = f"Usage: {PROG} <location>"
CANCELED_MESSAGE = "Error: The lookup was canceled."

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, description="Show the current weather for a place name.")
    parser.add_argument("--version", action="store_true", help="Print version information")
    parser.add_argument("location", nargs="*", help="Place name, e.g. London or San Jose")
    return parser


def is_interactive(stream: TextIO) -> bool:
    """True when stream is attached to a terminal a person can type into."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def print_version(out: TextIO):
    out.write(f"{PROG} version {__version__}\n")
    out.write(f"commit: {__commit__}\n")
    out.write(f"built at: {__build_date__}\n")


async def run_lookup(query: str, settings: Settings, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Build the Open-Meteo adapters, each with its own HTTP client, and run one lookup."""
    async with AsyncExitStack() as stack:
        geo_client = await stack.enter_async_context(create_http_client(settings.request_timeout_seconds))
        weather_client = await stack.enter_async_context(create_http_client(settings.request_timeout_seconds))
        deps = ReporterDeps(
            geocoding=OpenMeteoGeocoder(geo_client, settings.geocoding_url),
            weather=OpenMeteoWeather(weather_client, settings.forecast_url),
        )
        return await run_pipeline(
            query,
            deps,
            interactive=is_interactive(stdin),
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            timeout=settings.timeout_seconds,
        )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print_version(sys.stdout)
        return EXIT_OK

    query = " ".join(args.location).strip()
    if not query:
        print(USAGE)
        return EXIT_FAILURE

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Looking up weather for %r", query)
    try:
        return asyncio.run(run_lookup(query, settings, sys.stdin, sys.stdout, sys.stderr))
    except KeyboardInterrupt:
        print(CANCELED_MESSAGE, file=sys.stderr)
        return EXIT_FAILURE
