"""Backend selection for the translation cache."""

import logging
from typing import Optional

from mo_cache.services.caching.cache_store import CacheStore
from mo_cache.services.caching.file_cache_store import FileCacheStore
from mo_cache.services.caching.shared_cache_client import SharedCacheClient
from mo_cache.services.caching.shared_cache_store import SharedCacheStore
from mo_cache.services.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


def create_cache_store(
    settings: SettingsManager, shared_client: Optional[SharedCacheClient] = None
) -> CacheStore:
    """
    Pick the persistence backend once, at composition time.

    Args:
        settings: Source of the site id and file cache directory.
        shared_client: Active external object cache, if the host has one.

    Returns:
        A SharedCacheStore when a shared client is available, else a FileCacheStore.
    """
    if shared_client is not None:
        logger.info("Using shared object cache for translations")
        return SharedCacheStore(shared_client)

    cache_dir = settings.get_cache_dir()
    logger.info("Using file cache for translations in %s", cache_dir)
    return FileCacheStore(cache_dir=cache_dir, site_id=settings.get_site_id())
