"""Translation services - translator interface and the gettext upstream."""

from mo_cache.services.translation.translator import Translator, select_plural_text
from mo_cache.services.translation.upstream_translator import UpstreamTranslator

__all__ = [
    "Translator",
    "UpstreamTranslator",
    "select_plural_text",
]
