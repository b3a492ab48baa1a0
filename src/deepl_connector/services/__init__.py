"""Services layer - business logic and external integrations."""

from deepl_connector.services.settings_manager import API_KEY_NAME, SettingsManager

# Text processing services
from deepl_connector.services.text_processing import (
    clean_spaces_around_tags,
    normalize_text,
    unescape_html,
)

# Caching services
from deepl_connector.services.caching import TranslationCache, CacheRecord, InMemoryTranslationCache, FileTranslationCache

# Translation services
from deepl_connector.services.translation import (
    DeepLClient,
    DeepLTranslationService,
    FailureReason,
    MachineTranslateError,
    TextResult,
    TranslationResult,
    TranslationService,
    Usage,
)
from deepl_connector.services.config_resolver import DeepLConfig, resolve_api_key, resolve_base_url, resolve_config

from deepl_connector.services.translation_worker import TranslationWorker, WorkerSignals

__all__ = [
    "API_KEY_NAME",
    "SettingsManager",
    "normalize_text",
    "unescape_html",
    "clean_spaces_around_tags",
    "TranslationCache",
    "CacheRecord",
    "InMemoryTranslationCache",
    "FileTranslationCache",
    "DeepLClient",
    "DeepLTranslationService",
    "FailureReason",
    "MachineTranslateError",
    "TextResult",
    "TranslationResult",
    "TranslationService",
    "Usage",
    "DeepLConfig",
    "resolve_api_key",
    "resolve_base_url",
    "resolve_config",
    "TranslationWorker",
    "WorkerSignals",
]
