"""Configuration Resolver - picks credentials and the API endpoint for a request."""

from dataclasses import dataclass
from typing import Optional

from deepl_connector.services.settings_manager import SettingsManager
from deepl_connector.services.translation.errors import FailureReason, MachineTranslateError

DEEPL_URL = "https://api.deepl.com"
DEEPL_URL_FREE = "https://api-free.deepl.com"
FREE_KEY_SUFFIX = ":fx"

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 3


@dataclass(frozen=True)
class DeepLConfig:
    """Everything the client needs for one translation call."""

    api_key: str
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    split_sentences: bool = True
    formality: Optional[str] = None
    glossary_id: Optional[str] = None
    tag_handling: Optional[str] = None
    max_retries: int = DEFAULT_MAX_RETRIES

    @property
    def is_free_tier(self) -> bool:
        return self.api_key.endswith(FREE_KEY_SUFFIX)


def resolve_base_url(api_key: str, server_url: Optional[str] = None) -> str:
    """Explicit server URL wins; otherwise free keys (``:fx``) use the free endpoint."""
    if server_url:
        return server_url.rstrip("/")
    return DEEPL_URL_FREE if api_key.endswith(FREE_KEY_SUFFIX) else DEEPL_URL


def resolve_api_key(settings: SettingsManager, temporary_key: Optional[str] = None) -> str:
    """
    Stored credential first, then the engine's temporary key.

    Raises:
        MachineTranslateError: MISSING_API_KEY when neither is set.
    """
    api_key = settings.get_deepl_api_key()
    if not api_key:
        if not temporary_key or not temporary_key.strip():
            raise MachineTranslateError(FailureReason.MISSING_API_KEY)
        api_key = temporary_key.strip()
    return api_key


def resolve_config(
    settings: SettingsManager,
    temporary_key: Optional[str] = None,
    server_url: Optional[str] = None,
) -> DeepLConfig:
    """Build a DeepLConfig from host settings."""
    api_key = resolve_api_key(settings, temporary_key)
    return DeepLConfig(
        api_key=api_key,
        base_url=resolve_base_url(api_key, server_url or settings.get("DEEPL_SERVER_URL")),
        timeout=settings.get_float("DEEPL_TIMEOUT", DEFAULT_TIMEOUT),
        split_sentences=settings.get_bool("DEEPL_SENTENCE_SEGMENTING", True),
        formality=settings.get("DEEPL_FORMALITY"),
        glossary_id=settings.get("DEEPL_GLOSSARY_ID"),
        tag_handling=settings.get("DEEPL_TAG_HANDLING"),
        max_retries=settings.get_int("DEEPL_MAX_RETRIES", DEFAULT_MAX_RETRIES),
    )
