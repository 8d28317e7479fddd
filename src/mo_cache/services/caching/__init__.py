"""Caching services - abstract store interface and concrete backends."""

from mo_cache.services.caching.cache_keys import derive_key, file_cache_name, shared_cache_key
from mo_cache.services.caching.cache_store import CacheRecord, CacheStore, CacheStoreError
from mo_cache.services.caching.file_cache_store import FileCacheStore
from mo_cache.services.caching.shared_cache_client import (
    InMemorySharedCacheClient,
    RedisSharedCacheClient,
    SharedCacheClient,
)
from mo_cache.services.caching.shared_cache_store import SharedCacheStore
from mo_cache.services.caching.store_factory import create_cache_store

__all__ = [
    "CacheStore",
    "CacheStoreError",
    "CacheRecord",
    "FileCacheStore",
    "SharedCacheStore",
    "SharedCacheClient",
    "InMemorySharedCacheClient",
    "RedisSharedCacheClient",
    "create_cache_store",
    "derive_key",
    "file_cache_name",
    "shared_cache_key",
]
