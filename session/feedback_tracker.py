"""
Short-lived UI highlight state. Nothing here is domain data or persisted.
"""

import time
from typing import Callable, Dict, Hashable


class FeedbackTracker:
    """Markers that expire a fixed number of milliseconds after being set."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._expires_at: Dict[Hashable, float] = {}

    def mark(self, key: Hashable, duration_ms: int) -> None:
        now = self.clock()
        self._prune(now)
        self._expires_at[key] = now + duration_ms / 1000.0

    def is_active(self, key: Hashable) -> bool:
        expires_at = self._expires_at.get(key)
        if expires_at is None:
            return False
        if self.clock() >= expires_at:
            del self._expires_at[key]
            return False
        return True

    def discard(self, predicate: Callable[[Hashable], bool]) -> None:
        """Drop every marker whose key matches ``predicate``."""
        for key in [key for key in self._expires_at if predicate(key)]:
            del self._expires_at[key]

    def _prune(self, now: float) -> None:
        self.discard(lambda key: now >= self._expires_at[key])

    def marker_count(self) -> int:
        return len(self._expires_at)

    def clear(self) -> None:
        self._expires_at.clear()
