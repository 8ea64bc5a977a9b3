"""Pacing policies applied between processed manifests."""

import time
from collections.abc import Callable

DEFAULT_INTERVAL = 0.8


class FixedDelay:
    """Sleep a fixed interval after every manifest."""

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval
        self._sleep = sleep

    def pause(self) -> None:
        if self.interval:
            self._sleep(self.interval)


class TokenBucket:
    """Allow bursts of ``capacity`` calls, refilled at ``rate`` per second."""

    def __init__(
        self,
        rate: float,
        capacity: int = 1,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        if rate <= 0 or capacity < 1:
            raise ValueError("rate must be positive and capacity at least 1")
        self.rate = rate
        self.capacity = capacity
        self._sleep = sleep
        self._clock = clock
        self._tokens = float(capacity)
        self._updated = clock()

    def _refill(self) -> None:
        now = self._clock()
        self._tokens = min(self.capacity, self._tokens + (now - self._updated) * self.rate)
        self._updated = now

    def pause(self) -> None:
        self._refill()
        if self._tokens < 1:
            self._sleep((1 - self._tokens) / self.rate)
            self._refill()
        self._tokens = max(0.0, self._tokens - 1)
