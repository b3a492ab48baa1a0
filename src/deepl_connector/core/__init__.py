"""Domain layer - pure entities for translation requests and languages."""

from .language import Language, as_language, to_deepl_source, to_deepl_target
from .translation_request import MAX_TEXT_BYTES, TranslationRequest

__all__ = [
    "Language",
    "as_language",
    "to_deepl_source",
    "to_deepl_target",
    "TranslationRequest",
    "MAX_TEXT_BYTES",
]
