"""Text utilities for cache keying and cleaning machine-translated output."""

import html
import re

# OmegaT-style placeholder tags: <b0>, </b0>, <x1/>
_TAG = r"</?[a-zA-Z]+[0-9]+/?>"
TAG_TRAILING_SPACE = re.compile(_TAG + r"\s")
LEADING_SPACE_TAG = re.compile(r"\s" + _TAG)


def normalize_text(text: str) -> str:
    """
    Normalize segment text for consistent cache keying.

    Rules:
    - Trim leading and trailing whitespace
    - Collapse runs of whitespace (spaces, tabs, newlines) to single spaces
    - Case-sensitive

    Args:
        text: Original text to normalize.

    Returns:
        Normalized text string.
    """
    text = text.strip()
    text = re.sub(r'\s+', ' ', text)
    return text


def unescape_html(text: str) -> str:
    """Decode HTML entities the engine may return (&amp;, &#39;, ...)."""
    return html.unescape(text)


def clean_spaces_around_tags(machine_text: str, source_text: str) -> str:
    """
    Drop spaces the engine added next to placeholder tags.

    A space after (or before) a tag is kept only if the same tag/space pair
    appears in the source text.
    """
    for match in set(TAG_TRAILING_SPACE.findall(machine_text)):
        if match not in source_text:
            machine_text = machine_text.replace(match, match[:-1])
    for match in set(LEADING_SPACE_TAG.findall(machine_text)):
        if match not in source_text:
            machine_text = machine_text.replace(match, match[1:])
    return machine_text
