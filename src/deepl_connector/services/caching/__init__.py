"""Caching services - abstract interface and concrete implementations."""

from deepl_connector.services.caching.translation_cache import TranslationCache, CacheRecord
from deepl_connector.services.caching.in_memory_translation_cache import InMemoryTranslationCache
from deepl_connector.services.caching.file_translation_cache import FileTranslationCache

__all__ = [
    "TranslationCache",
    "CacheRecord",
    "InMemoryTranslationCache",
    "FileTranslationCache",
]
