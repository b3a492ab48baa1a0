"""Translation Cache abstraction - storage interface for finished translations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

CacheKey = tuple[str, str, str]


@dataclass
class CacheRecord:
    """A cached translation entry."""

    source_text: str
    source_lang: str
    target_lang: str
    translation: str
    model: str
    updated_at: datetime
    detected_source_language: Optional[str] = None

    @property
    def key(self) -> CacheKey:
        return (self.source_lang, self.target_lang, self.source_text)


class TranslationCache(ABC):
    """
    Abstract interface for caching translations.

    Keys are (source_lang, target_lang, normalized source text), with
    languages already mapped to DeepL codes.
    """

    @abstractmethod
    def get(
        self, source_lang: str, target_lang: str, source_text: str
    ) -> Optional[CacheRecord]:
        """
        Retrieve a cached entry.

        Args:
            source_lang: DeepL source language code.
            target_lang: DeepL target language code.
            source_text: Normalized source text.

        Returns:
            CacheRecord if found, else None.
        """
        pass

    @abstractmethod
    def put(self, record: CacheRecord) -> None:
        """Store or overwrite the entry for record.key."""
        pass

    @abstractmethod
    def delete(self, source_lang: str, target_lang: str, source_text: str) -> None:
        """Delete a single cache entry."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def list_keys(self) -> list[CacheKey]:
        """
        List all (source_lang, target_lang, source_text) keys.

        Useful for diagnostics and testing.
        """
        pass
