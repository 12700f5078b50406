# This project was developed with assistance from AI tools.
"""In-memory TTL cache.

Owned by whoever builds it (the app lifespan in production, the test in
tests), never a module-level singleton. The clock is injectable so expiry
can be tested without sleeping.
"""

import time
from collections.abc import Callable
from typing import Any


class TTLCache:
    """Key/value store whose entries expire ``ttl_seconds`` after being set.

    Expired entries are dropped on read and swept on every write.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        self._drop_expired(now)
        self._entries[key] = (now + self.ttl_seconds, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _drop_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
