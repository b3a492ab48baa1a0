"""Error mapping - turns DeepL HTTP responses and transport failures into typed reasons."""

import json
from enum import Enum
from typing import Optional

import requests


class FailureReason(Enum):
    """Why a translation did not produce text."""

    MISSING_API_KEY = "missing_api_key"
    AUTH_FAILED = "auth_failed"
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMITED = "rate_limited"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    TEXT_TOO_LONG = "text_too_long"
    INVALID_REQUEST = "invalid_request"
    SERVER_ERROR = "server_error"
    NETWORK_FAILURE = "network_failure"
    MALFORMED_RESPONSE = "malformed_response"
    DISABLED = "disabled"


MESSAGES = {
    FailureReason.MISSING_API_KEY: "DeepL API key not found. Configure it in the DeepL settings.",
    FailureReason.AUTH_FAILED: "DeepL rejected the API key.",
    FailureReason.QUOTA_EXCEEDED: "DeepL character quota exceeded.",
    FailureReason.RATE_LIMITED: "Too many requests to DeepL. Please try again later.",
    FailureReason.UNSUPPORTED_LANGUAGE: "DeepL does not support the language pair {source} -> {target}.",
    FailureReason.TEXT_TOO_LONG: "Text is too long for a single DeepL request.",
    FailureReason.INVALID_REQUEST: "DeepL rejected the request.",
    FailureReason.SERVER_ERROR: "DeepL service is unavailable.",
    FailureReason.NETWORK_FAILURE: "Could not connect to the DeepL server.",
    FailureReason.MALFORMED_RESPONSE: "Could not read the DeepL response.",
    FailureReason.DISABLED: "DeepL translation is disabled.",
}


class MachineTranslateError(Exception):
    """A translation failure with a typed reason."""

    def __init__(
        self,
        reason: FailureReason,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.reason = reason
        self.status_code = status_code
        self.detail = detail
        super().__init__(message or MESSAGES[reason])

    @property
    def message(self) -> str:
        return str(self)


def extract_error_detail(body: str) -> Optional[str]:
    """Return the ``message`` field of a DeepL error body, if any."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    detail = data.get("message")
    extra = data.get("detail")
    if detail and extra:
        return f"{detail} {extra}"
    return detail or extra


def _is_unsupported_language(detail: Optional[str]) -> bool:
    if not detail:
        return False
    lowered = detail.lower()
    mentions_lang = "target_lang" in lowered or "source_lang" in lowered
    return mentions_lang and ("not supported" in lowered or "unsupported" in lowered)


def reason_for_status(status_code: int, detail: Optional[str] = None) -> FailureReason:
    """Classify an HTTP status code from the DeepL API."""
    if status_code in (401, 403):
        return FailureReason.AUTH_FAILED
    if status_code == 456:
        return FailureReason.QUOTA_EXCEEDED
    if status_code in (429, 529):
        return FailureReason.RATE_LIMITED
    if status_code == 413:
        return FailureReason.TEXT_TOO_LONG
    if status_code == 400 and _is_unsupported_language(detail):
        return FailureReason.UNSUPPORTED_LANGUAGE
    if 400 <= status_code < 500:
        return FailureReason.INVALID_REQUEST
    return FailureReason.SERVER_ERROR


def map_http_error(
    status_code: int,
    body: str = "",
    source_lang: Optional[str] = None,
    target_lang: Optional[str] = None,
) -> MachineTranslateError:
    """Build the error for a non-2xx DeepL response."""
    detail = extract_error_detail(body)
    reason = reason_for_status(status_code, detail)
    message = MESSAGES[reason]
    if reason is FailureReason.UNSUPPORTED_LANGUAGE:
        message = message.format(source=source_lang or "auto", target=target_lang)
    if detail:
        message = f"{message} ({detail})"
    return MachineTranslateError(reason, message, status_code=status_code, detail=detail)


def map_transport_error(exc: requests.RequestException) -> MachineTranslateError:
    """Build the error for a request that never got an HTTP response."""
    if isinstance(exc, requests.Timeout):
        message = "Request to DeepL timed out. Please check your connection."
    else:
        message = MESSAGES[FailureReason.NETWORK_FAILURE]
    return MachineTranslateError(FailureReason.NETWORK_FAILURE, message, detail=str(exc))
