"""Simple in-memory TTL cache. No Redis needed for one proxy instance.

Expiry is lazy: an entry is only dropped when someone looks it up after its
TTL has passed. Keys nobody asks for again stay in memory until restart,
which is fine for the handful of distinct searches this proxy sees.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
RAWG may be called twice for the same key (once per worker).
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 10 * 60


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    stored_at: float


class TTLCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            logger.info("Cache miss: %s", key)
            return None

        if self._clock() - entry.stored_at > self.ttl_seconds:
            logger.info("Cache expired: %s", key)
            del self._store[key]
            return None

        logger.info("Cache hit: %s", key)
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._store[key] = CacheEntry(value=value, stored_at=self._clock())
        logger.info("Cache set: %s", key)
