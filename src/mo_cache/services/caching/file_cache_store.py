"""File-based cache store keeping one artifact per (site, domain, catalog)."""

import json
import logging
import os
import tempfile
from pathlib import Path

from mo_cache.core import CatalogHandle
from mo_cache.services.caching.cache_keys import file_cache_name
from mo_cache.services.caching.cache_store import CacheRecord, CacheStore, CacheStoreError

logger = logging.getLogger(__name__)


class FileCacheStore(CacheStore):
    """
    File-based cache store writing one JSON artifact per catalog.

    Artifacts live in a shared directory (the system temp dir by default)
    named `<md5(site domain path)>.cache`, so installations sharing a temp
    directory never read each other's entries.

    Format:
    {
        "version": 1,
        "mtime": 1768824896,
        "cache": {"<request key>": "<translation>", ...}
    }
    """

    CACHE_VERSION = 1

    def __init__(self, cache_dir: Path, site_id: str):
        if not site_id:
            raise ValueError("site_id must not be empty")
        self._cache_dir = Path(cache_dir)
        self._site_id = site_id

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def load(self, handle: CatalogHandle) -> dict[str, str]:
        """Read the artifact for a catalog; stale or unreadable artifacts load as empty."""
        cache_file = self.cache_file_path(handle)
        if not cache_file.exists():
            return {}

        try:
            data = json.loads(cache_file.read_text(encoding="utf-8"))
            if not isinstance(data, dict) or data.get("version") != self.CACHE_VERSION:
                raise ValueError("unsupported cache file version")
            record = CacheRecord.from_payload(data)
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable cache file %s: %s", cache_file, e)
            return {}

        if not record.is_fresh_for(handle):
            logger.debug("Discarding stale cache file %s", cache_file)
            return {}

        return record.entries

    def persist(self, handle: CatalogHandle, entries: dict[str, str]) -> None:
        """Write the artifact through a temp file and an atomic rename."""
        cache_file = self.cache_file_path(handle)
        data = CacheRecord(mtime=handle.mtime, entries=entries).to_payload()
        data["version"] = self.CACHE_VERSION

        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            # Same directory as the target so the rename stays on one filesystem
            tmp_fd, tmp_path = tempfile.mkstemp(
                suffix=".tmp",
                prefix=".mocache_",
                dir=self._cache_dir,
            )
            try:
                with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, cache_file)
            except BaseException:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
                raise
        except OSError as e:
            raise CacheStoreError(f"Error writing cache file {cache_file}: {e}") from e

        logger.debug("Wrote %d cache entries to %s", len(entries), cache_file)

    def cache_file_path(self, handle: CatalogHandle) -> Path:
        """Get the artifact path for a given catalog."""
        return self._cache_dir / file_cache_name(self._site_id, handle.domain, handle.path)
