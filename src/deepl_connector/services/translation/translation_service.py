"""Translation Service - abstract machine-translation engine as the host sees it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from deepl_connector.core.language import LanguageLike
from deepl_connector.services.translation.errors import FailureReason


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    model: str
    error: Optional[str] = None
    failure: Optional[FailureReason] = None
    detected_source_language: Optional[str] = None
    from_cache: bool = False

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract machine-translation engine.

    Implementations (e.g., DeepLTranslationService) handle API calls and
    report failures through TranslationResult instead of raising.
    """

    #: Engine name shown by the host.
    name: str = ""

    #: Host preference key that enables the engine.
    preference_name: str = ""

    @abstractmethod
    def translate(
        self, source_lang: LanguageLike, target_lang: LanguageLike, text: str
    ) -> TranslationResult:
        """
        Translate text between two languages.

        Args:
            source_lang: Source language (Language or tag such as "de-DE").
            target_lang: Target language.
            text: Segment text to translate.

        Returns:
            TranslationResult with text or error message.
        """
        pass

    def is_configurable(self) -> bool:
        """Whether the engine offers a configuration UI."""
        return False
