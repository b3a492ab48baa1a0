"""Translation request entity - one text translation call to DeepL."""

from dataclasses import dataclass
from typing import Dict, Optional


FORMALITY_OPTIONS = ("default", "more", "less", "prefer_more", "prefer_less")
TAG_HANDLING_OPTIONS = ("xml", "html")

# DeepL rejects request bodies above 128 KiB.
MAX_TEXT_BYTES = 128 * 1024


@dataclass
class TranslationRequest:
    """Parameters for a single ``/v2/translate`` call, already in DeepL codes."""

    text: str
    target_lang: str
    source_lang: Optional[str] = None
    split_sentences: bool = True
    formality: Optional[str] = None
    glossary_id: Optional[str] = None
    tag_handling: Optional[str] = None

    def __post_init__(self):
        if not self.target_lang:
            raise ValueError("target_lang is required")
        if self.formality is not None and self.formality not in FORMALITY_OPTIONS:
            raise ValueError(f"Unsupported formality: {self.formality!r}")
        if self.tag_handling is not None and self.tag_handling not in TAG_HANDLING_OPTIONS:
            raise ValueError(f"Unsupported tag_handling: {self.tag_handling!r}")
        if self.glossary_id and not self.source_lang:
            raise ValueError("glossary_id requires source_lang")

    @property
    def text_bytes(self) -> int:
        return len(self.text.encode("utf-8"))

    def to_form_params(self) -> Dict[str, str]:
        """
        Build the form-encoded body.

        ``split_sentences`` is only sent when disabled, since DeepL splits by default.
        """
        params: Dict[str, str] = {
            "text": self.text,
            "target_lang": self.target_lang,
        }
        if self.source_lang:
            params["source_lang"] = self.source_lang
        if not self.split_sentences:
            params["split_sentences"] = "0"
        if self.formality:
            params["formality"] = self.formality
        if self.glossary_id:
            params["glossary_id"] = self.glossary_id
        if self.tag_handling:
            params["tag_handling"] = self.tag_handling
        return params
