"""Upstream translator - parses a compiled .mo catalog with gettext."""

import gettext
import logging
import struct
from pathlib import Path
from typing import Optional

from mo_cache.services.translation.translator import Translator, select_plural_text

logger = logging.getLogger(__name__)


class SourceTextTranslations(gettext.NullTranslations):
    """Untranslated fallback returning the source text, singular for a count of +/-1."""

    def ngettext(self, msgid1, msgid2, n):
        return select_plural_text(msgid1, msgid2, n)

    def npgettext(self, context, msgid1, msgid2, n):
        return select_plural_text(msgid1, msgid2, n)


class UpstreamTranslator(Translator):
    """
    Translator reading directly from a compiled catalog.

    The file is parsed in full on the first lookup and served from memory
    afterwards, so building one costs nothing until a lookup misses the cache.
    A catalog that cannot be parsed behaves as an empty one: every lookup
    returns its source text.
    """

    def __init__(self, catalog_path: Path):
        self._catalog_path = Path(catalog_path)
        self._catalog: Optional[gettext.NullTranslations] = None

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    def translate(self, text: str, context: Optional[str] = None) -> str:
        catalog = self._load()
        if context is None:
            return catalog.gettext(text)
        return catalog.pgettext(context, text)

    def translate_plural(
        self, singular: str, plural: str, count: int, context: Optional[str] = None
    ) -> str:
        catalog = self._load()
        if context is None:
            return catalog.ngettext(singular, plural, count)
        return catalog.npgettext(context, singular, plural, count)

    def _load(self) -> gettext.NullTranslations:
        if self._catalog is None:
            try:
                with self._catalog_path.open("rb") as fp:
                    self._catalog = gettext.GNUTranslations(fp)
            except (OSError, ValueError, struct.error) as e:
                logger.warning("Failed to parse catalog %s: %s", self._catalog_path, e)
                self._catalog = SourceTextTranslations()
            else:
                logger.debug("Parsed catalog %s", self._catalog_path)
                self._catalog.add_fallback(SourceTextTranslations())
        return self._catalog
