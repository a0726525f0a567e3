# ABOUTME: Absolute time budget shared by every network call in a single run.
# ABOUTME: Wraps asyncio.timeout_at so later calls only get what earlier calls left over.

import asyncio


class Deadline:
    """A fixed point on the event loop clock after which network calls are abandoned."""

    def __init__(self, when: float):
        self.when = when

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        """Start a budget of `seconds` from now. Must be called with a running loop."""
        return cls(asyncio.get_running_loop().time() + seconds)

    def remaining(self) -> float:
        return max(0.0, self.when - asyncio.get_running_loop().time())

    def expired(self) -> bool:
        return self.remaining() == 0.0

    def scope(self) -> asyncio.Timeout:
        """Async context manager that raises TimeoutError once the deadline passes."""
        return asyncio.timeout_at(self.when)
