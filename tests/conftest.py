"""Shared fixtures: fake DeepL HTTP responses and a clean environment."""

import json
import os
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

DEEPL_ENV_VARS = (
    "DEEPL_API_KEY",
    "DEEPL_SERVER_URL",
    "DEEPL_TIMEOUT",
    "DEEPL_SENTENCE_SEGMENTING",
    "DEEPL_FORMALITY",
    "DEEPL_GLOSSARY_ID",
    "DEEPL_TAG_HANDLING",
    "DEEPL_MAX_RETRIES",
    "DEEPL_ENABLED",
)


def make_response(status_code=200, body=None, headers=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    if body is None:
        response.text = ""
        response.json.side_effect = ValueError("No JSON object could be decoded")
    elif isinstance(body, str):
        response.text = body
        try:
            parsed = json.loads(body)
        except ValueError:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = parsed
    else:
        response.text = json.dumps(body)
        response.json.return_value = body
    return response


def translation_body(text, detected="DE"):
    return {
        "translations": [
            {"detected_source_language": detected, "text": text, "billed_characters": 11}
        ]
    }


@pytest.fixture
def clean_env():
    """Remove DeepL settings from the environment before and after a test."""
    saved = {name: os.environ.pop(name, None) for name in DEEPL_ENV_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def session():
    """A requests.Session double whose request() returns queued responses."""
    return MagicMock()


@pytest.fixture
def fake_response():
    """Factory for fake responses: fake_response(status, body, headers)."""
    return make_response


@pytest.fixture
def deepl_body():
    """Factory for a successful /v2/translate body."""
    return translation_body
