"""
DeepL Connector - DeepL machine translation for computer-assisted translation tools.

This package provides a connector plugin with:
- DeepL v2 API client (free and paid tiers)
- Typed failure reasons for auth, quota, language and network errors
- Translation caching (session or file-backed)
- PySide6 configuration dialog for the API key
"""

__version__ = "0.1.0"

# Make key components available at package level
from deepl_connector.core import Language, TranslationRequest
from deepl_connector.services import (
    DeepLTranslationService,
    FailureReason,
    MachineTranslateError,
    SettingsManager,
    TranslationResult,
)
from deepl_connector.plugin import EngineRegistry, load_plugins, unload_plugins

__all__ = [
    "Language",
    "TranslationRequest",
    "DeepLTranslationService",
    "FailureReason",
    "MachineTranslateError",
    "SettingsManager",
    "TranslationResult",
    "EngineRegistry",
    "load_plugins",
    "unload_plugins",
]
