"""Translator - interface every catalog translator exposes to the host."""

from abc import ABC, abstractmethod
from typing import Optional


def select_plural_text(singular: str, plural: str, count: int) -> str:
    """Form used when no plural rules apply: singular only for a count of +/-1."""
    return singular if abs(count) == 1 else plural


class Translator(ABC):
    """
    Abstract translator for one text domain.

    Implementations (UpstreamTranslator, TranslationCacheController) resolve
    messages; host call sites depend only on this surface.
    """

    @abstractmethod
    def translate(self, text: str, context: Optional[str] = None) -> str:
        """
        Translate a singular message.

        Args:
            text: Source message id.
            context: Optional disambiguating message context.

        Returns:
            Localized string, or `text` when the catalog has no entry.
        """
        pass

    @abstractmethod
    def translate_plural(
        self, singular: str, plural: str, count: int, context: Optional[str] = None
    ) -> str:
        """
        Translate a message with plural forms.

        Args:
            singular: Singular source message id.
            plural: Plural source message.
            count: Quantity selecting the plural form.
            context: Optional disambiguating message context.

        Returns:
            Localized string for `count`.
        """
        pass
