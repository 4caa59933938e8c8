"""
Static request throttling for rate-limited APIs.
"""

import time
from typing import Callable

from ..core.config import SPOTIFY_CONFIG


class ThrottlePolicy:
    """
    Fixed minimum interval between outbound requests.

    Callers invoke ``wait()`` after each request. The delay is constant, it does
    not adapt to responses.
    """

    def __init__(self, min_interval: float = None, sleep: Callable[[float], None] = time.sleep):
        if min_interval is None:
            min_interval = SPOTIFY_CONFIG["REQUEST_DELAY"]
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self._sleep = sleep
        self.waits = 0

    @classmethod
    def from_requests_per_second(cls, requests_per_second: float, **kwargs) -> "ThrottlePolicy":
        if requests_per_second <= 0:
            raise ValueError("requests_per_second must be > 0")
        return cls(1.0 / requests_per_second, **kwargs)

    @classmethod
    def none(cls) -> "ThrottlePolicy":
        """Policy that never sleeps (tests, replayed responses)."""
        return cls(0.0)

    def wait(self):
        self.waits += 1
        if self.min_interval > 0:
            self._sleep(self.min_interval)

    def __repr__(self):
        return f"ThrottlePolicy(min_interval={self.min_interval})"
