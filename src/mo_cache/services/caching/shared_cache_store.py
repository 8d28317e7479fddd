"""Shared cache store keeping one record per catalog in an external object cache."""

import logging

from mo_cache.core import CatalogHandle
from mo_cache.services.caching.cache_keys import shared_cache_key
from mo_cache.services.caching.cache_store import CacheRecord, CacheStore
from mo_cache.services.caching.shared_cache_client import SharedCacheClient

logger = logging.getLogger(__name__)


class SharedCacheStore(CacheStore):
    """
    Cache store backed by a shared key-value cache.

    Each catalog maps to the key `mo__<md5(path)>` holding
    `{"mtime": int, "cache": {key: translation}}`. Keys are scoped by
    catalog path only: two domains loading the same catalog file share
    one record.
    """

    def __init__(self, client: SharedCacheClient):
        if client is None:
            raise ValueError("SharedCacheClient must not be None")
        self._client = client

    def load(self, handle: CatalogHandle) -> dict[str, str]:
        key = shared_cache_key(handle.path)
        data = self._client.get(key)
        if data is None:
            return {}

        try:
            record = CacheRecord.from_payload(data)
        except ValueError as e:
            logger.debug("Ignoring malformed shared cache record %s: %s", key, e)
            return {}

        if not record.is_fresh_for(handle):
            logger.debug("Discarding stale shared cache record %s", key)
            return {}

        return record.entries

    def persist(self, handle: CatalogHandle, entries: dict[str, str]) -> None:
        record = CacheRecord(mtime=handle.mtime, entries=entries)
        self._client.set(shared_cache_key(handle.path), record.to_payload())
