"""Translation services - abstract interface, DeepL client and engine."""

from deepl_connector.services.translation.errors import FailureReason, MachineTranslateError
from deepl_connector.services.translation.translation_service import TranslationService, TranslationResult
from deepl_connector.services.translation.deepl_client import DeepLClient, TextResult, Usage
from deepl_connector.services.translation.deepl_translation_service import DeepLTranslationService

__all__ = [
    "FailureReason",
    "MachineTranslateError",
    "TranslationService",
    "TranslationResult",
    "DeepLClient",
    "TextResult",
    "Usage",
    "DeepLTranslationService",
]
