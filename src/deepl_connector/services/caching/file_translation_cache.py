"""File-based translation cache implementation for persistent storage across sessions."""

import json
import logging
from collections import OrderedDict
from datetime import datetime
from pathlib import Path
from typing import Optional

from deepl_connector.services.caching.translation_cache import (
    CacheKey,
    CacheRecord,
    TranslationCache,
)

logger = logging.getLogger(__name__)


class FileTranslationCache(TranslationCache):
    """
    File-based cache storing translations in a single JSON file.

    The file lives in ``cache_dir`` as `.deepl-translations-cache.json`.
    Recently used entries are also kept in a bounded in-memory LRU.

    Format:
    {
        "version": 1,
        "entries": [
            {
                "source_text": "...",
                "source_lang": "DE",
                "target_lang": "EN-US",
                "translation": "...",
                "detected_source_language": "DE",
                "model": "DeepL",
                "updated_at": "2026-01-19T12:34:56"
            }
        ]
    }
    """

    CACHE_VERSION = 1
    CACHE_FILENAME = ".deepl-translations-cache.json"

    def __init__(self, cache_dir: Path, max_lru_size: int = 100):
        self._cache_dir = Path(cache_dir)
        self._in_memory_lru: "OrderedDict[CacheKey, CacheRecord]" = OrderedDict()
        self._max_lru_size = max_lru_size

    @property
    def cache_file(self) -> Path:
        return self._cache_dir / self.CACHE_FILENAME

    def get(
        self, source_lang: str, target_lang: str, source_text: str
    ) -> Optional[CacheRecord]:
        """Retrieve cached entry, checking in-memory LRU first, then file."""
        key = (source_lang, target_lang, source_text)

        if key in self._in_memory_lru:
            self._in_memory_lru.move_to_end(key)
            return self._in_memory_lru[key]

        if not self.cache_file.exists():
            return None

        try:
            for entry in self._read_entries():
                if self._entry_key(entry) == key:
                    record = self._to_record(entry)
                    self._add_to_lru(record)
                    return record
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Error reading cache file %s: %s", self.cache_file, e)
            return None

        return None

    def put(self, record: CacheRecord) -> None:
        """Store or update a cache entry in both LRU and file."""
        self._add_to_lru(record)

        try:
            entries = self._read_entries() if self.cache_file.exists() else []
            entry_data = self._to_entry(record)

            for idx, entry in enumerate(entries):
                if self._entry_key(entry) == record.key:
                    entries[idx] = entry_data
                    break
            else:
                entries.append(entry_data)

            self._write_entries(entries)
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Error writing cache file %s: %s", self.cache_file, e)

    def delete(self, source_lang: str, target_lang: str, source_text: str) -> None:
        """Delete a single cache entry."""
        key = (source_lang, target_lang, source_text)
        self._in_memory_lru.pop(key, None)

        if not self.cache_file.exists():
            return

        try:
            entries = [e for e in self._read_entries() if self._entry_key(e) != key]
            self._write_entries(entries)
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Error deleting from cache file %s: %s", self.cache_file, e)

    def clear(self) -> None:
        """Clear all entries and remove the cache file."""
        self._in_memory_lru.clear()

        if self.cache_file.exists():
            try:
                self.cache_file.unlink()
            except OSError as e:
                logger.warning("Error deleting cache file %s: %s", self.cache_file, e)

    def list_keys(self) -> list[CacheKey]:
        """List all keys stored on disk."""
        if not self.cache_file.exists():
            return []

        try:
            return [self._entry_key(entry) for entry in self._read_entries()]
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Error reading cache file %s: %s", self.cache_file, e)
            return []

    def _read_entries(self) -> list[dict]:
        data = json.loads(self.cache_file.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            logger.warning("Ignoring cache file %s: not a JSON object", self.cache_file)
            return []
        entries = data.get("entries", [])
        if not isinstance(entries, list):
            logger.warning("Ignoring cache file %s: entries is not a list", self.cache_file)
            return []
        return [entry for entry in entries if isinstance(entry, dict)]

    def _write_entries(self, entries: list[dict]) -> None:
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        data = {"version": self.CACHE_VERSION, "entries": entries}
        self.cache_file.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )

    @staticmethod
    def _entry_key(entry: dict) -> CacheKey:
        return (entry["source_lang"], entry["target_lang"], entry["source_text"])

    @staticmethod
    def _to_record(entry: dict) -> CacheRecord:
        return CacheRecord(
            source_text=entry["source_text"],
            source_lang=entry["source_lang"],
            target_lang=entry["target_lang"],
            translation=entry["translation"],
            model=entry["model"],
            updated_at=datetime.fromisoformat(entry["updated_at"]),
            detected_source_language=entry.get("detected_source_language"),
        )

    @staticmethod
    def _to_entry(record: CacheRecord) -> dict:
        return {
            "source_text": record.source_text,
            "source_lang": record.source_lang,
            "target_lang": record.target_lang,
            "translation": record.translation,
            "detected_source_language": record.detected_source_language,
            "model": record.model,
            "updated_at": record.updated_at.isoformat(),
        }

    def _add_to_lru(self, record: CacheRecord) -> None:
        """Add entry to in-memory LRU cache, evicting the least recently used."""
        self._in_memory_lru[record.key] = record
        self._in_memory_lru.move_to_end(record.key)

        if len(self._in_memory_lru) > self._max_lru_size:
            self._in_memory_lru.popitem(last=False)
