"""DeepL Translation Service - the machine-translation engine the host loads."""

import logging
from datetime import datetime
from typing import Optional

import requests

from deepl_connector.core import TranslationRequest, to_deepl_source, to_deepl_target
from deepl_connector.core.language import LanguageLike
from deepl_connector.services.caching import CacheRecord, InMemoryTranslationCache, TranslationCache
from deepl_connector.services.config_resolver import DeepLConfig, resolve_config
from deepl_connector.services.settings_manager import SettingsManager
from deepl_connector.services.text_processing import (
    clean_spaces_around_tags,
    normalize_text,
    unescape_html,
)
from deepl_connector.services.translation.deepl_client import DeepLClient
from deepl_connector.services.translation.errors import FailureReason, MachineTranslateError
from deepl_connector.services.translation.translation_service import (
    TranslationResult,
    TranslationService,
)

logger = logging.getLogger(__name__)


class DeepLTranslationService(TranslationService):
    """
    Translation engine backed by the DeepL v2 API.

    Results are cached per (source, target, normalized text), so asking for
    the same segment twice only reaches DeepL once. Failures are never cached.
    """

    name = "DeepL"
    preference_name = "allow_deepl_translate"

    def __init__(
        self,
        settings: Optional[SettingsManager] = None,
        cache: Optional[TranslationCache] = None,
        temporary_key: Optional[str] = None,
        server_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            settings: Host settings; a SettingsManager for the working directory if None.
            cache: Translation cache; a session-level in-memory cache if None.
            temporary_key: API key to fall back on when none is stored.
            server_url: Custom server URL, e.g. a local mock server in tests.
            session: Shared requests session; each call opens its own if None.
        """
        self.settings = settings or SettingsManager()
        self.cache = cache if cache is not None else InMemoryTranslationCache()
        self.temporary_key = temporary_key
        self.server_url = server_url
        self._session = session

    def is_configurable(self) -> bool:
        return True

    def translate(
        self, source_lang: LanguageLike, target_lang: LanguageLike, text: str
    ) -> TranslationResult:
        if not self.settings.is_engine_enabled():
            return self._failure(MachineTranslateError(FailureReason.DISABLED))

        try:
            source = to_deepl_source(source_lang)
            target = to_deepl_target(target_lang)
        except ValueError as e:
            return self._failure(MachineTranslateError(FailureReason.INVALID_REQUEST, str(e)))

        normalized = normalize_text(text)
        if not normalized:
            return TranslationResult(text="", model=self.name)

        cached = self.cache.get(source, target, normalized)
        if cached is not None:
            logger.debug("Cache hit for %s -> %s", source, target)
            return TranslationResult(
                text=cached.translation,
                model=cached.model,
                detected_source_language=cached.detected_source_language,
                from_cache=True,
            )

        try:
            translated, detected = self._request_translation(source, target, text)
        except MachineTranslateError as e:
            return self._failure(e)

        self.cache.put(
            CacheRecord(
                source_text=normalized,
                source_lang=source,
                target_lang=target,
                translation=translated,
                model=self.name,
                updated_at=datetime.now(),
                detected_source_language=detected,
            )
        )
        return TranslationResult(
            text=translated,
            model=self.name,
            detected_source_language=detected,
        )

    def get_usage(self):
        """
        Character usage for the configured key.

        Raises:
            MachineTranslateError: When the key is missing or DeepL fails.
        """
        config = resolve_config(self.settings, self.temporary_key, self.server_url)
        with self._client(config) as client:
            return client.get_usage()

    def _client(self, config: DeepLConfig) -> DeepLClient:
        return DeepLClient(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            session=self._session,
        )

    def _request_translation(self, source: str, target: str, text: str):
        config = resolve_config(self.settings, self.temporary_key, self.server_url)
        try:
            request = TranslationRequest(
                text=text,
                source_lang=source,
                target_lang=target,
                split_sentences=config.split_sentences,
                formality=config.formality,
                glossary_id=config.glossary_id,
                tag_handling=config.tag_handling,
            )
        except ValueError as e:
            raise MachineTranslateError(FailureReason.INVALID_REQUEST, str(e)) from e

        logger.info("Translating %d characters %s -> %s", len(text), source, target)
        with self._client(config) as client:
            result = client.translate_text(request)

        translated = unescape_html(result.text)
        translated = clean_spaces_around_tags(translated, text)
        return translated, result.detected_source_language

    def _failure(self, error: MachineTranslateError) -> TranslationResult:
        logger.warning("DeepL translation failed (%s): %s", error.reason.value, error.message)
        return TranslationResult(
            text="",
            model=self.name,
            error=error.message,
            failure=error.reason,
        )
