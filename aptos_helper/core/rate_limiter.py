"""Per-user cooldown gate for incoming chat events."""
import time
from typing import Callable, Optional


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class RateLimiter:
    """Allows at most one action per user per fixed window.

    The window is measured from the user's last *allowed* action; denied
    attempts do not push it forward. Entries are never evicted.
    """

    def __init__(
        self,
        window_ms: int = 2000,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.window_ms = window_ms
        self._clock = clock or _monotonic_ms
        self._last_allowed: dict[int, float] = {}

    def is_allowed(self, user_id: int) -> bool:
        """Return True and record the attempt if *user_id* is outside the window."""
        now = self._clock()
        last = self._last_allowed.get(user_id)

        if last is None or (now - last) > self.window_ms:
            self._last_allowed[user_id] = now
            return True

        return False

    def __len__(self) -> int:
        return len(self._last_allowed)
