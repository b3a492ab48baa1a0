"""Text processing services - normalization and output cleanup."""

from deepl_connector.services.text_processing.text_normalization import (
    clean_spaces_around_tags,
    normalize_text,
    unescape_html,
)

__all__ = [
    "normalize_text",
    "unescape_html",
    "clean_spaces_around_tags",
]
