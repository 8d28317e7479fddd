"""Services layer - configuration, storage backends and translators."""

from mo_cache.services.settings_manager import SettingsManager

# Translation services
from mo_cache.services.translation import Translator, UpstreamTranslator, select_plural_text

# Caching services
from mo_cache.services.caching import (
    CacheRecord,
    CacheStore,
    CacheStoreError,
    FileCacheStore,
    InMemorySharedCacheClient,
    RedisSharedCacheClient,
    SharedCacheClient,
    SharedCacheStore,
    create_cache_store,
    derive_key,
)

__all__ = [
    "SettingsManager",
    "Translator",
    "UpstreamTranslator",
    "select_plural_text",
    "CacheRecord",
    "CacheStore",
    "CacheStoreError",
    "FileCacheStore",
    "SharedCacheStore",
    "SharedCacheClient",
    "InMemorySharedCacheClient",
    "RedisSharedCacheClient",
    "create_cache_store",
    "derive_key",
]
