# ABOUTME: Reduces a geocoding candidate list to a single location.
# ABOUTME: Lists ambiguous matches and, when interactive, prompts until a valid number is entered.

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from weather_reporter.errors import AmbiguousLocationError, SelectionInputError
from weather_reporter.models import Location, NoMatch, Resolution, Resolved

logger = logging.getLogger(__name__)

MAX_CHOICES = 10


class SelectionState(Enum):
    PROMPTING = "prompting"
    VALIDATING = "validating"
    RESOLVED = "resolved"
    FAULTED = "faulted"


class SelectionPrompt:
    """Prompt/validate loop for picking one of a numbered list of locations.

    Invalid answers send the machine back to PROMPTING with no attempt limit.
    A failed or exhausted read moves it to FAULTED, which is terminal.
    """

    def __init__(self, choices: Sequence[Location], stdin: TextIO, stdout: TextIO):
        self.choices = list(choices)
        self.stdin = stdin
        self.stdout = stdout
        self.state = SelectionState.PROMPTING
        self.answer = ""
        self.selected: Location | None = None
        self.fault: str | None = None

    def step(self) -> SelectionState:
        if self.state is SelectionState.PROMPTING:
            self._prompt()
        elif self.state is SelectionState.VALIDATING:
            self._validate()
        return self.state

    def run(self) -> Location:
        while self.state not in (SelectionState.RESOLVED, SelectionState.FAULTED):
            self.step()
        if self.state is SelectionState.FAULTED:
            raise SelectionInputError(self.fault)
        return self.selected

    def _prompt(self):
        self.stdout.write(f"Select location [1-{len(self.choices)}]: ")
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as exc:
            self.fault = str(exc) or type(exc).__name__
            self.state = SelectionState.FAULTED
            return
        if not line:
            self.fault = "end of input"
            self.state = SelectionState.FAULTED
            return
        self.answer = line.strip()
        self.state = SelectionState.VALIDATING

    def _validate(self):
        count = len(self.choices)
        try:
            index = int(self.answer)
        except ValueError:
            index = 0
        if 1 <= index <= count:
            self.selected = self.choices[index - 1]
            self.state = SelectionState.RESOLVED
            return
        logger.debug("Rejected selection %r", self.answer)
        self.stdout.write(f"Invalid selection. Please enter a number between 1 and {count}.\n")
        self.state = SelectionState.PROMPTING


def print_candidates(out: TextIO, candidates: Sequence[Location]):
    out.write("Multiple locations found:\n")
    for number, loc in enumerate(candidates, start=1):
        out.write(f"{number}. {loc.label}\n")


def select_location(candidates: Sequence[Location], interactive: bool, stdin: TextIO, stdout: TextIO) -> Location:
    """Pick one of several candidates.

    Only the first MAX_CHOICES candidates are listed or selectable. The listing is
    always written first; without an interactive terminal the call then fails with
    AmbiguousLocationError so the user can see why the query needs narrowing.
    """
    choices = list(candidates[:MAX_CHOICES])
    print_candidates(stdout, choices)
    if not interactive:
        raise AmbiguousLocationError()
    return SelectionPrompt(choices, stdin, stdout).run()


def resolve_candidates(
    candidates: Sequence[Location], interactive: bool, stdin: TextIO, stdout: TextIO
) -> Resolution:
    """Decide which location a search refers to.

    Zero candidates give NoMatch and one candidate is resolved without any I/O.
    Several candidates go through select_location, which may raise
    AmbiguousLocationError or SelectionInputError.
    """
    if not candidates:
        return NoMatch()
    if len(candidates) == 1:
        return Resolved(location=candidates[0])
    return Resolved(location=select_location(candidates, interactive, stdin, stdout))
