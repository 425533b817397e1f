"""
Deadline shared by the observer loops.
"""

import time


class Deadline:
    """A fixed point in time after which observation must stop.

    Anchored on the monotonic clock when created; it is never reset or
    extended.
    """

    def __init__(self, timeout: float, clock=time.monotonic):
        self._clock = clock
        self._expires_at = clock() + timeout

    @property
    def remaining(self) -> float:
        """Seconds left before expiry, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self._clock() >= self._expires_at

    def __repr__(self) -> str:
        return f"Deadline(remaining={self.remaining:.1f})"
