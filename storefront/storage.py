"""
Key/value persistence for the cart.

The cart only needs a string slot addressed by key. Two backends:
- MemoryStorage: process-local dict, used for local runs and tests
- RedisStorage: Upstash Redis over REST, survives across sessions
"""

from typing import Mapping, Optional, Protocol

from upstash_redis import Redis

from storefront import config
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """Opaque string slot storage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage."""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


_sync_redis_client: Optional[Redis] = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        if not config.redis_configured():
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _sync_redis_client = Redis(
            url=config.UPSTASH_REDIS_REST_URL,
            token=config.UPSTASH_REDIS_REST_TOKEN,
        )

    return _sync_redis_client


class RedisStorage:
    """
    Upstash Redis backed storage.

    Read failures are logged and reported as an absent slot so a flaky
    connection degrades to an empty cart. Write failures propagate.
    """

    def __init__(self, client: Redis | None = None, ttl_seconds: int = config.CART_TTL_SECONDS):
        self._client = client
        self.ttl_seconds = ttl_seconds

    @property
    def client(self) -> Redis:
        """Get Redis client (lazy initialization)."""
        if self._client is None:
            self._client = get_redis_sync()
        return self._client

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except Exception as e:
            logger.warning(f"Redis read failed for {sanitize_id_for_logging(key)}: {e}")
            return None
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return str(value)

    def set(self, key: str, value: str) -> None:
        if self.ttl_seconds > 0:
            self.client.set(key, value, ex=self.ttl_seconds)
        else:
            self.client.set(key, value)

    def delete(self, key: str) -> None:
        self.client.delete(key)


def create_storage() -> KeyValueStorage:
    """Redis when Upstash credentials are configured, memory otherwise."""
    if config.redis_configured():
        logger.info("Using Upstash Redis cart storage")
        return RedisStorage()
    logger.info("Upstash Redis not configured, using in-memory cart storage")
    return MemoryStorage()


__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "RedisStorage",
    "get_redis_sync",
    "create_storage",
]
