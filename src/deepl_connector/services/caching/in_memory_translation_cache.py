"""In-memory translation cache for testing and session-level caching."""

from typing import Optional

from deepl_connector.services.caching.translation_cache import (
    CacheKey,
    CacheRecord,
    TranslationCache,
)


class InMemoryTranslationCache(TranslationCache):
    """
    Simple in-memory cache implementation.

    Used for testing and session-level caching. No persistence.
    """

    def __init__(self):
        self._store: dict[CacheKey, CacheRecord] = {}

    def get(
        self, source_lang: str, target_lang: str, source_text: str
    ) -> Optional[CacheRecord]:
        return self._store.get((source_lang, target_lang, source_text))

    def put(self, record: CacheRecord) -> None:
        self._store[record.key] = record

    def delete(self, source_lang: str, target_lang: str, source_text: str) -> None:
        self._store.pop((source_lang, target_lang, source_text), None)

    def clear(self) -> None:
        self._store.clear()

    def list_keys(self) -> list[CacheKey]:
        return list(self._store.keys())
