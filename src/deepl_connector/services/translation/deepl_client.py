"""DeepL Client - HTTP access to the DeepL v2 REST API."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import requests

from deepl_connector.core import MAX_TEXT_BYTES, TranslationRequest
from deepl_connector.services.translation.errors import (
    FailureReason,
    MachineTranslateError,
    map_http_error,
    map_transport_error,
)

logger = logging.getLogger(__name__)

TRANSLATE_PATH = "/v2/translate"
USAGE_PATH = "/v2/usage"

RETRYABLE_STATUS = (429, 503, 529)
MAX_RETRY_AFTER = 60.0


@dataclass
class TextResult:
    """First translation returned by ``/v2/translate``."""

    text: str
    detected_source_language: Optional[str] = None


@dataclass
class Usage:
    """Character usage for the current billing period."""

    character_count: int
    character_limit: int

    @property
    def limit_reached(self) -> bool:
        return self.character_limit > 0 and self.character_count >= self.character_limit


class DeepLClient:
    """
    Thin client around ``requests`` for the DeepL API.

    Rate-limited and temporarily unavailable responses are retried with
    exponential backoff. Every other failure is raised as MachineTranslateError.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_delay: float = 2.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self._session = session or requests.Session()
        self._owns_session = session is None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    @property
    def _headers(self) -> dict:
        return {"Authorization": f"DeepL-Auth-Key {self.api_key}"}

    def translate_text(self, request: TranslationRequest) -> TextResult:
        """
        Translate one text.

        Args:
            request: Parameters, already mapped to DeepL language codes.

        Returns:
            TextResult with the first translation from the response.

        Raises:
            MachineTranslateError: On any HTTP, transport or parsing failure.
        """
        if request.text_bytes > MAX_TEXT_BYTES:
            raise MachineTranslateError(
                FailureReason.TEXT_TOO_LONG,
                f"Text is {request.text_bytes} bytes, DeepL accepts at most {MAX_TEXT_BYTES}.",
            )

        response = self._send(
            "POST",
            TRANSLATE_PATH,
            data=request.to_form_params(),
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )
        return self._parse_translation(response)

    def get_usage(self) -> Usage:
        """Fetch character usage for the account behind the API key."""
        response = self._send("GET", USAGE_PATH)
        data = self._json(response)
        try:
            return Usage(
                character_count=int(data["character_count"]),
                character_limit=int(data["character_limit"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MachineTranslateError(FailureReason.MALFORMED_RESPONSE, detail=str(e)) from e

    def _send(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None,
    ) -> requests.Response:
        url = self.base_url + path
        delay = self.retry_delay
        attempt = 0

        while True:
            attempt += 1
            logger.debug("DeepL %s %s (attempt %d/%d)", method, path, attempt, self.max_retries)
            try:
                response = self._session.request(
                    method,
                    url,
                    data=data,
                    headers=self._headers,
                    timeout=self.timeout,
                )
            except requests.RequestException as e:
                logger.warning("DeepL request failed: %s", e)
                raise map_transport_error(e) from e

            if response.status_code < 400:
                return response

            if response.status_code in RETRYABLE_STATUS and attempt < self.max_retries:
                wait = self._retry_after(response, delay)
                logger.info(
                    "DeepL returned %d, retrying in %.1f seconds", response.status_code, wait
                )
                time.sleep(wait)
                delay *= 2
                continue

            error = map_http_error(
                response.status_code,
                response.text,
                source_lang=source_lang,
                target_lang=target_lang,
            )
            logger.error("DeepL error %d: %s", response.status_code, error.message)
            raise error

    @staticmethod
    def _retry_after(response: requests.Response, default: float) -> float:
        header = response.headers.get("Retry-After")
        if header is None:
            return default
        try:
            return min(max(0.0, float(header)), MAX_RETRY_AFTER)
        except ValueError:
            return default

    @staticmethod
    def _json(response: requests.Response) -> dict:
        try:
            data = response.json()
        except ValueError as e:
            logger.error("DeepL response is not valid JSON")
            raise MachineTranslateError(FailureReason.MALFORMED_RESPONSE, detail=str(e)) from e
        if not isinstance(data, dict):
            raise MachineTranslateError(FailureReason.MALFORMED_RESPONSE)
        return data

    def _parse_translation(self, response: requests.Response) -> TextResult:
        # { "translations": [ { "detected_source_language": "DE", "text": "Hello World!" } ] }
        data = self._json(response)
        translations = data.get("translations")
        if not isinstance(translations, list) or not translations:
            logger.error("DeepL response has no translations")
            raise MachineTranslateError(FailureReason.MALFORMED_RESPONSE)
        first = translations[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not isinstance(text, str):
            logger.error("DeepL response has no translation text")
            raise MachineTranslateError(FailureReason.MALFORMED_RESPONSE)
        return TextResult(
            text=text,
            detected_source_language=first.get("detected_source_language"),
        )
