"""In-memory TTL cache for Hevy API GET responses."""

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)


DEFAULT_TTL_SECONDS = 300  # 5 minutes


@runtime_checkable
class CacheProtocol(Protocol):
    """Protocol for cache implementations."""

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        ...

    async def set(
        self,
        key: str,
        value: Any,
        expire_seconds: Optional[int] = None,
    ) -> None:
        """Set value in cache."""
        ...

    async def delete(self, key: str) -> None:
        """Delete value from cache."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache."""
        ...


def build_cache_key(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Key a GET request by URL plus its stringified, sorted query params."""
    if not params:
        return url
    query = "&".join(
        f"{key}={value}"
        for key, value in sorted(params.items())
        if value is not None
    )
    return f"{url}?{query}" if query else url


class ResponseCache:
    """
    Simple in-memory cache with per-entry expiry.

    Entries are served until their TTL elapses; expired entries are dropped
    lazily on read. When full, the oldest insertion is evicted.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_size: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._ttl_seconds = ttl_seconds
        self._max_size = max_size
        self._clock = clock
        self.hits = 0
        self.misses = 0

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[Any]:
        """Get a cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            self.misses += 1
            logger.debug(f"Cache expired: {key}")
            return None

        self.hits += 1
        return value

    async def set(
        self,
        key: str,
        value: Any,
        expire_seconds: Optional[int] = None,
    ) -> None:
        """Cache a value for expire_seconds (default: the cache TTL)."""
        if key not in self._entries and len(self._entries) >= self._max_size:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]

        ttl = self._ttl_seconds if expire_seconds is None else expire_seconds
        self._entries[key] = (self._clock() + ttl, value)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
