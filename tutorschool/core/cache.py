"""
Time-to-live cache.

Small keyed cache whose entries expire after a fixed lifetime. The clock is
injectable so expiry can be driven deterministically.

Dependencies: time (stdlib)
System role: Injectable cache for exchange rates and other remote lookups
"""

import time
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """
    Keyed cache with per-entry expiry.

    Expired entries are dropped lazily when read.

    Attributes:
        ttl_seconds: Lifetime of each entry
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[K, tuple[V, float]] = {}

    def get(self, key: K) -> V | None:
        """Return the cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return value

    def set(self, key: K, value: V) -> None:
        """Store a value, restarting its lifetime."""
        self._entries[key] = (value, self._clock())

    def invalidate(self, key: K) -> None:
        """Drop a single entry if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)
