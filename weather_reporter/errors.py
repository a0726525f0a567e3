# ABOUTME: Error taxonomy shared by the geocoding and weather adapters and the pipeline.
# ABOUTME: Provides the classification rules that turn upstream exceptions into ProviderErrors.

import asyncio
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import NamedTuple

import httpx

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    TIMEOUT = "timeout"
    CANCELED = "canceled"
    UNAVAILABLE = "unavailable"
    INVALID_QUERY = "invalid_query"
    MALFORMED_RESPONSE = "malformed_response"


class ReporterError(Exception):
    """Base for failures reported to the user; str() is the user-facing message."""


class ProviderError(ReporterError):
    """A geocoding or weather call failed; the upstream cause is chained, never shown."""

    def __init__(self, kind: ErrorKind, operation: str):
        self.kind = kind
        self.operation = operation
        if kind is ErrorKind.TIMEOUT:
            message = f"The {operation} took too long. Please try again."
        else:
            message = f"The {operation} service is currently unavailable. Please try again later."
        super().__init__(message)


class AmbiguousLocationError(ReporterError):
    """Several candidates matched and no one is available to choose between them."""

    def __init__(self):
        super().__init__("multiple locations found, please be more specific")


class SelectionInputError(ReporterError):
    """The interactive selection prompt could not read a line."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"failed to read input: {reason}")


class ClassificationRule(NamedTuple):
    """Maps exceptions of the given types (optionally filtered by a predicate) to a kind."""

    kind: ErrorKind
    exc_types: tuple[type[BaseException], ...]
    matches: Callable[[BaseException], bool] | None = None


# TimeoutError subclasses OSError, so the timeout rule has to come first.
COMMON_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(ErrorKind.TIMEOUT, (TimeoutError, httpx.TimeoutException)),
    ClassificationRule(ErrorKind.CANCELED, (asyncio.CancelledError,)),
    ClassificationRule(ErrorKind.UNAVAILABLE, (httpx.HTTPError, OSError)),
)


def has_status(*codes: int) -> Callable[[BaseException], bool]:
    """Predicate matching httpx.HTTPStatusError responses with one of the given status codes."""

    def check(exc: BaseException) -> bool:
        return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code in codes

    return check


def classify_error(exc: BaseException, rules: tuple[ClassificationRule, ...]) -> ErrorKind | None:
    """Return the kind of the first rule that matches exc, or None if no rule does."""
    for rule in rules:
        if isinstance(exc, rule.exc_types) and (rule.matches is None or rule.matches(exc)):
            return rule.kind
    return None


@contextmanager
def normalized_errors(operation: str, rules: tuple[ClassificationRule, ...]) -> Iterator[None]:
    """Re-raise classified upstream exceptions as ProviderError; let everything else through."""
    try:
        yield
    except ReporterError:
        raise
    except BaseException as exc:
        kind = classify_error(exc, rules)
        if kind is None or _task_is_cancelling(exc):
            raise
        logger.debug("%s failed (%s)", operation, kind.value, exc_info=exc)
        raise ProviderError(kind, operation) from exc


def _task_is_cancelling(exc: BaseException) -> bool:
    """True when exc is a cancellation requested on the current task.

    Such a CancelledError belongs to whoever called Task.cancel() (an outer
    timeout, a TaskGroup, asyncio.run on Ctrl-C) and must keep propagating.
    Only a CancelledError raised without a pending request is reported as CANCELED.
    """
    if not isinstance(exc, asyncio.CancelledError):
        return False
    try:
        task = asyncio.current_task()
    except RuntimeError:
        return False
    return task is not None and task.cancelling() > 0
