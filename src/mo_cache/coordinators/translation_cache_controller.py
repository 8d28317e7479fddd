"""Translation Cache Controller - memoizes a domain's lookups over a cache store."""

import logging
from typing import Callable, Optional

from mo_cache.core import CatalogHandle
from mo_cache.services.caching import CacheStore, CacheStoreError, derive_key
from mo_cache.services.translation import Translator, UpstreamTranslator, select_plural_text

logger = logging.getLogger(__name__)

UpstreamFactory = Callable[[CatalogHandle], Translator]


def default_upstream_factory(handle: CatalogHandle) -> Translator:
    return UpstreamTranslator(handle.path)


class TranslationCacheController(Translator):
    """
    Serves a domain's translations from a persisted cache.

    Entries are loaded from the store once, at construction. Misses are
    resolved by the override translator when one is chained, otherwise by a
    lazily built upstream translator, then remembered. `close()` writes the
    full entry map back to the store, once, and only if a miss occurred.
    """

    def __init__(
        self,
        handle: CatalogHandle,
        store: CacheStore,
        override: Optional[Translator] = None,
        upstream_factory: Optional[UpstreamFactory] = None,
    ) -> None:
        if handle is None:
            raise ValueError("CatalogHandle must not be None")
        if store is None:
            raise ValueError("CacheStore must not be None")

        self._handle = handle
        self._store = store
        self._override = override
        self._upstream_factory = upstream_factory or default_upstream_factory
        self._upstream: Optional[Translator] = None
        self._dirty = False
        self._closed = False

        self._cache: dict[str, str] = store.load(handle)
        logger.debug(
            "Loaded %d cached translations for domain '%s' from %s",
            len(self._cache),
            handle.domain,
            handle.path,
        )

    @property
    def handle(self) -> CatalogHandle:
        return self._handle

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def entries(self) -> dict[str, str]:
        return dict(self._cache)

    def __len__(self) -> int:
        return len(self._cache)

    def translate(self, text: str, context: Optional[str] = None) -> str:
        key = derive_key([text, context], self._handle.domain)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        return self._remember(key, self._resolver().translate(text, context))

    def translate_plural(
        self, singular: str, plural: str, count: int, context: Optional[str] = None
    ) -> str:
        text = select_plural_text(singular, plural, count)
        key = derive_key([singular, text, count, context], self._handle.domain)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        return self._remember(
            key, self._resolver().translate_plural(singular, plural, count, context)
        )

    def close(self) -> None:
        """Persist new entries if any lookup missed; later calls do nothing."""
        if self._closed:
            return
        self._closed = True

        if not self._dirty:
            return

        try:
            self._store.persist(self._handle, self._cache)
        except CacheStoreError as e:
            logger.warning(
                "Could not persist translation cache for domain '%s': %s",
                self._handle.domain,
                e,
            )
            return

        self._dirty = False

    def __enter__(self) -> "TranslationCacheController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _remember(self, key: str, translation: str) -> str:
        # Misses after close are still served but no longer flushed
        self._dirty = True
        self._cache[key] = translation
        return translation

    def _resolver(self) -> Translator:
        if self._override is not None:
            return self._override
        if self._upstream is None:
            self._upstream = self._upstream_factory(self._handle)
        return self._upstream
