"""Short-TTL response cache for aggregated payloads.

The engine is stateless; this cache is the hosting layer's policy of reusing
a whole response for a few minutes.
"""

import json
import logging
import time
from functools import lru_cache
from typing import Any, Protocol

import redis

from backend.app.config import get_settings

logger = logging.getLogger(__name__)


class ResponseCache(Protocol):
    """Cache of JSON-serializable response bodies."""

    def get(self, key: str) -> dict[str, Any] | None:
        """Return a live cached body, or None."""
        ...

    def set(self, key: str, body: dict[str, Any], ttl_seconds: int) -> None:
        """Store a body for ttl_seconds."""
        ...


class InMemoryResponseCache:
    """Process-local cache with monotonic-clock expiry.

    Expired entries are swept on every write and at most `max_entries` are
    kept, oldest first out.
    """

    def __init__(self, max_entries: int = 1024) -> None:
        self._entries: dict[str, tuple[float, dict[str, Any]]] = {}
        self._max_entries = max_entries

    def get(self, key: str) -> dict[str, Any] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, body = entry
        if time.monotonic() >= expires_at:
            del self._entries[key]
            return None
        return body

    def set(self, key: str, body: dict[str, Any], ttl_seconds: int) -> None:
        now = time.monotonic()
        for stale in [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]:
            del self._entries[stale]
        self._entries.pop(key, None)
        while len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]
        self._entries[key] = (now + ttl_seconds, body)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class RedisResponseCache:
    """Redis-backed cache using SETEX.

    Redis errors never fail a request: a failed read is a miss and a failed
    write is dropped.
    """

    def __init__(self, redis_client: redis.Redis, prefix: str = "conditions") -> None:
        """Initialize cache.

        Args:
            redis_client: Redis client
            prefix: Key namespace
        """
        self._redis = redis_client
        self._prefix = prefix

    def get(self, key: str) -> dict[str, Any] | None:
        try:
            raw = self._redis.get(f"{self._prefix}:{key}")
        except redis.RedisError as e:
            logger.warning("Response cache read failed for %s: %s", key, e)
            return None
        if raw is None:
            return None
        body: dict[str, Any] = json.loads(raw)
        return body

    def set(self, key: str, body: dict[str, Any], ttl_seconds: int) -> None:
        try:
            self._redis.setex(f"{self._prefix}:{key}", ttl_seconds, json.dumps(body))
        except redis.RedisError as e:
            logger.warning("Response cache write failed for %s: %s", key, e)


def cache_key(endpoint: str, **params: Any) -> str:
    """Deterministic key from endpoint and query parameters."""
    parts = [f"{k}={params[k]}" for k in sorted(params) if params[k] is not None]
    return f"{endpoint}?{'&'.join(parts)}"


@lru_cache
def get_response_cache() -> ResponseCache:
    """FastAPI dependency: Redis cache when configured, else in-memory."""
    settings = get_settings()
    if settings.redis_url:
        client = redis.from_url(settings.redis_url, decode_responses=True)  # type: ignore[no-untyped-call]
        return RedisResponseCache(client)
    return InMemoryResponseCache(max_entries=settings.response_cache_max_entries)
