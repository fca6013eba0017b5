"""Per-client admission control for comment creation."""

import threading
import time
from dataclasses import dataclass
from typing import Callable

import logfire

from .base import Service


@dataclass
class _Window:
    started_at: float
    count: int


class RateLimiter(Service):
    """Fixed-window counter per client.

    One instance is shared by every request in the process. The whole
    check-and-update runs under a lock so two concurrent requests from the
    same client can never both see "under limit".
    """

    def __init__(
        self,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize rate limiter.

        Args:
            window_seconds: Window length in seconds
            clock: Monotonic time source, injectable for tests
        """
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, _Window] = {}

    def admit(self, client: str, limit: int) -> bool:
        """Count one request from ``client`` and report whether it may proceed.

        Args:
            client: Client identifier (IP address)
            limit: Admissions allowed per window

        Returns:
            True if admitted, False if the client is over its allowance
        """
        with self._lock:
            now = self._clock()
            self._prune(now)

            window = self._windows.get(client)
            if window is None:
                self._windows[client] = _Window(started_at=now, count=1)
                return True

            if window.count < limit:
                window.count += 1
                return True

        logfire.warn("Rate limit refused", client=client, limit=limit)
        return False

    def tracked_clients(self) -> int:
        """Number of clients with a live window."""
        with self._lock:
            self._prune(self._clock())
            return len(self._windows)

    def _prune(self, now: float) -> None:
        expired = [
            client
            for client, window in self._windows.items()
            if now - window.started_at >= self.window_seconds
        ]
        for client in expired:
            del self._windows[client]
