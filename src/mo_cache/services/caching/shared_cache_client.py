"""Shared key-value cache clients used by the shared cache store."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import redis

from mo_cache.services.caching.cache_store import CacheStoreError

logger = logging.getLogger(__name__)


class SharedCacheClient(ABC):
    """
    Abstract get/set interface to an external object cache.

    Values are plain JSON-compatible structures. No TTL is applied; entries
    live until the backing service evicts or overwrites them.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Fetch a value.

        Returns:
            The stored value, or None if absent or the service is unreachable.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Store or overwrite a value in a single write.

        Raises:
            CacheStoreError: If the service rejected the write.
        """
        pass


class InMemorySharedCacheClient(SharedCacheClient):
    """
    Simple in-process client.

    Used for testing and single-process hosts. No persistence.
    """

    def __init__(self):
        self._store: dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        """Retrieve a stored value if it exists."""
        raw = self._store.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        """Store a serialized copy so later mutation of `value` is not shared."""
        self._store[key] = json.dumps(value, ensure_ascii=False)

    def list_keys(self) -> list[str]:
        """List stored keys. Useful for diagnostics and testing."""
        return list(self._store.keys())


class RedisSharedCacheClient(SharedCacheClient):
    """Client storing JSON-encoded values in Redis."""

    def __init__(self, client: redis.Redis):
        if client is None:
            raise ValueError("Redis client must not be None")
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisSharedCacheClient":
        return cls(
            redis.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
        )

    def is_available(self) -> bool:
        """True if the server answers a ping."""
        try:
            return bool(self._redis.ping())
        except redis.RedisError as e:
            logger.warning("Shared cache unreachable: %s", e)
            return False

    def get(self, key: str) -> Optional[Any]:
        try:
            raw = self._redis.get(key)
        except redis.RedisError as e:
            logger.warning("Shared cache read failed for %s: %s", key, e)
            return None
        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            logger.debug("Ignoring undecodable shared cache value %s: %s", key, e)
            return None

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        try:
            self._redis.set(key, payload)
        except redis.RedisError as e:
            raise CacheStoreError(f"Error writing shared cache key {key}: {e}") from e
