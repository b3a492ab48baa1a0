"""Language entity - host language tags and their DeepL API codes."""

from dataclasses import dataclass
from typing import Dict, Optional, Union


# DeepL accepts a few regional variants as targets only.
TARGET_LANG_MAP: Dict[str, str] = {
    "EN-US": "EN-US",
    "EN-GB": "EN-GB",
    "EN": "EN-US",
    "PT-BR": "PT-BR",
    "PT-PT": "PT-PT",
    "PT": "PT-BR",
    "ZH-CN": "ZH-HANS",
    "ZH-TW": "ZH-HANT",
}

# Source languages are always sent without a region.
SOURCE_LANG_MAP: Dict[str, str] = {
    "EN-US": "EN",
    "EN-GB": "EN",
    "PT-BR": "PT",
    "PT-PT": "PT",
    "ZH-CN": "ZH",
    "ZH-TW": "ZH",
    "ZH-HANS": "ZH",
    "ZH-HANT": "ZH",
}


@dataclass(frozen=True)
class Language:
    """A language as the host tool knows it, e.g. ``de-DE`` or ``pt``."""

    language_code: str
    country_code: Optional[str] = None

    @classmethod
    def parse(cls, tag: str) -> "Language":
        """
        Parse a language tag.

        Accepts ``xx``, ``xx-YY`` and ``xx_YY``. The language part is lower-cased
        and the region (or script) part upper-cased.

        Raises:
            ValueError: If the tag is empty.
        """
        if tag is None or not tag.strip():
            raise ValueError("Language tag must not be empty")
        parts = tag.strip().replace("_", "-").split("-", 1)
        language = parts[0].lower()
        if not language:
            raise ValueError(f"Invalid language tag: {tag!r}")
        country = parts[1].upper() if len(parts) > 1 and parts[1] else None
        return cls(language_code=language, country_code=country)

    @property
    def tag(self) -> str:
        """Normalized ``xx-YY`` form."""
        if self.country_code:
            return f"{self.language_code}-{self.country_code}"
        return self.language_code

    def __str__(self) -> str:
        return self.tag


LanguageLike = Union[Language, str]


def as_language(value: LanguageLike) -> Language:
    """Accept either a Language or a tag string."""
    if isinstance(value, Language):
        return value
    return Language.parse(value)


def _map_language(language: Language, table: Dict[str, str]) -> str:
    key = language.tag.upper()
    return table.get(key, language.language_code.upper())


def to_deepl_target(language: LanguageLike) -> str:
    """DeepL code for the ``target_lang`` parameter."""
    return _map_language(as_language(language), TARGET_LANG_MAP)


def to_deepl_source(language: LanguageLike) -> str:
    """DeepL code for the ``source_lang`` parameter."""
    return _map_language(as_language(language), SOURCE_LANG_MAP)
