# ABOUTME: Runs one lookup: search, disambiguate, fetch current weather, print the report.
# ABOUTME: Both network calls share a single deadline; any failure maps to exit status 1.

import logging
from typing import TextIO

from weather_reporter.deadline import Deadline
from weather_reporter.deps import ReporterDeps
from weather_reporter.disambiguation import resolve_candidates
from weather_reporter.errors import ReporterError
from weather_reporter.models import NoMatch
from weather_reporter.report import print_report

logger = logging.getLogger(__name__)

DEFAULT_RUN_TIMEOUT = 30.0

EXIT_OK = 0
EXIT_FAILURE = 1


async def run_pipeline(
    query: str,
    deps: ReporterDeps,
    *,
    interactive: bool,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    timeout: float = DEFAULT_RUN_TIMEOUT,
) -> int:
    """Resolve `query` to one location and print its current weather.

    The deadline starts here and is not reset between the two provider calls, so a
    slow search leaves less time for the weather request. The interactive prompt
    waits on the user without any timeout of its own. "Not found" is a successful
    run; every ReporterError is printed on stderr and returns EXIT_FAILURE.
    """
    deadline = Deadline.after(timeout)
    try:
        candidates = await deps.geocoding.search(query, deadline)
        logger.debug("Search for %r returned %d candidate(s)", query, len(candidates))

        # The run is the only task on its loop, so the prompt may block it; the deadline
        # is not armed here because scopes only wrap the two provider calls.
        resolution = resolve_candidates(candidates, interactive, stdin, stdout)
        if isinstance(resolution, NoMatch):
            stdout.write(f"Location not found: {query}\n")
            return EXIT_OK

        location = resolution.location
        measurement = await deps.weather.get_current_weather(location.latitude, location.longitude, deadline)
    except ReporterError as exc:
        stderr.write(f"Error: {exc}\n")
        return EXIT_FAILURE

    try:
        print_report(stdout, location, measurement)
    except OSError as exc:
        logger.debug("Report output failed", exc_info=exc)
        stderr.write(f"Error printing weather: {exc}\n")
        return EXIT_FAILURE
    return EXIT_OK
