"""Cache Store abstraction - plugin interface for persisted translation lookups."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from mo_cache.core import CatalogHandle


class CacheStoreError(Exception):
    """Raised when a cache store cannot persist its entries."""


@dataclass
class CacheRecord:
    """Persisted form of a catalog's resolved lookups."""

    mtime: int
    entries: dict[str, str] = field(default_factory=dict)

    def is_fresh_for(self, handle: CatalogHandle) -> bool:
        """True if the record was written for this catalog version or a newer one."""
        return self.mtime >= handle.mtime

    def to_payload(self) -> dict:
        return {"mtime": self.mtime, "cache": dict(self.entries)}

    @classmethod
    def from_payload(cls, payload: object) -> "CacheRecord":
        """
        Validate and rebuild a record from its stored payload.

        Raises:
            ValueError: If the payload is not a well-formed record.
        """
        if not isinstance(payload, dict):
            raise ValueError("cache payload must be a mapping")

        mtime = payload.get("mtime")
        entries = payload.get("cache")
        if not isinstance(mtime, int) or isinstance(mtime, bool):
            raise ValueError("cache payload has no integer mtime")
        if not isinstance(entries, dict):
            raise ValueError("cache payload has no entry mapping")
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in entries.items()):
            raise ValueError("cache entries must map strings to strings")

        return cls(mtime=mtime, entries=entries)


class CacheStore(ABC):
    """
    Abstract interface for persisting resolved translations per catalog.

    Implementations (FileCacheStore, SharedCacheStore) handle storage details.
    The controller depends on this abstraction, not on concrete storage.
    """

    @abstractmethod
    def load(self, handle: CatalogHandle) -> dict[str, str]:
        """
        Load the persisted entries for a catalog.

        Args:
            handle: Catalog whose entries are requested.

        Returns:
            The stored entries if a record exists with mtime >= handle.mtime,
            else an empty dict. Missing, corrupt or unreachable storage is
            reported as an empty dict, never raised.
        """
        pass

    @abstractmethod
    def persist(self, handle: CatalogHandle, entries: dict[str, str]) -> None:
        """
        Replace the stored record for a catalog.

        Writes {mtime: handle.mtime, entries} so that later loads with the
        same or an older catalog mtime return these entries. Concurrent
        readers never observe a partial record.

        Args:
            handle: Catalog the entries were resolved from.
            entries: Full entry map to store.

        Raises:
            CacheStoreError: If the record could not be written.
        """
        pass
