"""Translator Registry - intercepts catalog loads and tracks the active translator per domain."""

import atexit
import logging
import os
from pathlib import Path
from typing import Callable, Optional

from mo_cache.core import CatalogHandle
from mo_cache.coordinators.translation_cache_controller import (
    TranslationCacheController,
    UpstreamFactory,
    default_upstream_factory,
)
from mo_cache.services.caching import CacheStore
from mo_cache.services.translation import Translator, select_plural_text

logger = logging.getLogger(__name__)

CatalogPathFilter = Callable[[Path, str], Path]


class TranslatorRegistry:
    """
    Owns the mapping of text domain to its active translator.

    `override_load_catalog` is the interception point the host calls when
    it is about to load a catalog for a domain. Loading a second catalog
    for a domain chains the previous translator behind the new one.
    """

    def __init__(
        self,
        store: CacheStore,
        upstream_factory: Optional[UpstreamFactory] = None,
        flush_at_exit: bool = False,
    ) -> None:
        if store is None:
            raise ValueError("CacheStore must not be None")

        self._store = store
        self._upstream_factory = upstream_factory or default_upstream_factory
        self._flush_at_exit = flush_at_exit
        self._active: dict[str, Translator] = {}
        self._controllers: list[TranslationCacheController] = []
        self.catalog_path_filters: list[CatalogPathFilter] = []

    def add_catalog_path_filter(self, path_filter: CatalogPathFilter) -> None:
        """Register a callable rewriting catalog paths before they are loaded."""
        self.catalog_path_filters.append(path_filter)

    def override_load_catalog(self, domain: str, catalog_path: Path) -> bool:
        """
        Take over translation for a domain from the given catalog.

        Args:
            domain: Text domain being loaded.
            catalog_path: Catalog file the host was about to load.

        Returns:
            True if a caching translator was installed for the domain,
            False if the catalog is unreadable and the host should fall
            back to its default loading.
        """
        path = Path(catalog_path)
        for path_filter in self.catalog_path_filters:
            path = Path(path_filter(path, domain))

        if not path.is_file() or not os.access(path, os.R_OK):
            logger.debug("Not intercepting domain '%s': %s is not readable", domain, path)
            return False

        try:
            handle = CatalogHandle.from_path(path, domain)
        except OSError as e:
            logger.debug("Not intercepting domain '%s': %s", domain, e)
            return False

        controller = TranslationCacheController(
            handle=handle,
            store=self._store,
            override=self._active.get(domain),
            upstream_factory=self._upstream_factory,
        )
        self._active[domain] = controller
        self._controllers.append(controller)
        if self._flush_at_exit:
            atexit.register(controller.close)

        logger.info("Caching translations for domain '%s' from %s", domain, path)
        return True

    def register(self, domain: str, translator: Translator) -> None:
        """Install a translator the host loaded by other means."""
        self._active[domain] = translator

    def get(self, domain: str) -> Optional[Translator]:
        return self._active.get(domain)

    def domains(self) -> list[str]:
        return list(self._active.keys())

    def translate(self, domain: str, text: str, context: Optional[str] = None) -> str:
        translator = self._active.get(domain)
        if translator is None:
            return text
        return translator.translate(text, context)

    def translate_plural(
        self,
        domain: str,
        singular: str,
        plural: str,
        count: int,
        context: Optional[str] = None,
    ) -> str:
        translator = self._active.get(domain)
        if translator is None:
            return select_plural_text(singular, plural, count)
        return translator.translate_plural(singular, plural, count, context)

    def close_all(self) -> None:
        """Flush every controller this registry created, including superseded ones."""
        for controller in self._controllers:
            controller.close()
