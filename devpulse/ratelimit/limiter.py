"""Fixed-window request limiter keyed by client identifier."""

import threading
import time
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field

DEFAULT_MAX_REQUESTS = 10
DEFAULT_WINDOW_MS = 60_000


def monotonic_ms() -> float:
    """Milliseconds from a monotonic clock."""
    return time.monotonic() * 1000


class RateLimitDecision(BaseModel):
    """Outcome of one rate-limit check."""

    allowed: bool = Field(..., description="Whether the request may proceed")
    remaining: int = Field(..., ge=0, description="Requests left in the current window")
    reset_after_ms: int = Field(..., ge=0, description="Milliseconds until the window resets")


class _Window:
    __slots__ = ("count", "reset_at")

    def __init__(self, count: int, reset_at: float) -> None:
        self.count = count
        self.reset_at = reset_at


class RateLimiter:
    """Allow at most ``max_requests`` per identifier in each fixed window.

    The first request from an identifier opens a window. Expired windows are
    detected when the identifier is next checked; ``sweep`` drops identifiers
    that have been idle for more than two windows.
    """

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_ms: int = DEFAULT_WINDOW_MS,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Initialize rate limiter.

        Args:
            max_requests: Requests allowed per window
            window_ms: Window length in milliseconds
            clock: Millisecond clock, monotonic time by default
        """
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_ms < 1:
            raise ValueError("window_ms must be at least 1")

        self.max_requests = max_requests
        self.window_ms = window_ms
        self._clock = clock or monotonic_ms
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._windows)

    def check(self, identifier: str) -> RateLimitDecision:
        """
        Record a request and decide whether it is allowed.

        Args:
            identifier: Client identity (IP address, user id, ...)

        Returns:
            Decision with remaining quota and time to reset
        """
        now = self._clock()
        with self._lock:
            window = self._windows.get(identifier)
            if window is None or now > window.reset_at:
                window = _Window(count=0, reset_at=now + self.window_ms)
                self._windows[identifier] = window

            reset_after_ms = max(0, int(window.reset_at - now))

            if window.count >= self.max_requests:
                return RateLimitDecision(allowed=False, remaining=0, reset_after_ms=reset_after_ms)

            window.count += 1
            return RateLimitDecision(
                allowed=True,
                remaining=self.max_requests - window.count,
                reset_after_ms=reset_after_ms,
            )

    def sweep(self) -> int:
        """
        Drop identifiers whose window ended more than one window ago.

        Returns:
            Number of identifiers removed
        """
        now = self._clock()
        with self._lock:
            stale = [
                identifier
                for identifier, window in self._windows.items()
                if now - window.reset_at > self.window_ms
            ]
            for identifier in stale:
                del self._windows[identifier]
        return len(stale)
