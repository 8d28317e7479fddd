"""Coordinators - Orchestration layer between host translation calls and storage."""

from .translation_cache_controller import TranslationCacheController
from .translator_registry import TranslatorRegistry

__all__ = [
    "TranslationCacheController",
    "TranslatorRegistry",
]
