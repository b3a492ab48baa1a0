"""Unit tests for DeepLClient request shape, retries and parsing."""

from unittest.mock import patch

import pytest
import requests

from deepl_connector.core import TranslationRequest
from deepl_connector.services import DeepLClient, FailureReason, MachineTranslateError

KEY = "deepl8api8key"
BASE_URL = "http://localhost:8080"


@pytest.fixture
def client(session):
    return DeepLClient(api_key=KEY, base_url=BASE_URL + "/", session=session)


@pytest.fixture
def request_de_en():
    return TranslationRequest(text="source text", source_lang="DE", target_lang="EN-US")


class TestTranslateText:

    def test_request_shape(self, client, session, request_de_en, fake_response, deepl_body):
        session.request.return_value = fake_response(200, deepl_body("Hello World!"))

        result = client.translate_text(request_de_en)

        assert result.text == "Hello World!"
        assert result.detected_source_language == "DE"
        session.request.assert_called_once_with(
            "POST",
            "http://localhost:8080/v2/translate",
            data={"text": "source text", "target_lang": "EN-US", "source_lang": "DE"},
            headers={"Authorization": "DeepL-Auth-Key " + KEY},
            timeout=10.0,
        )

    def test_first_translation_is_returned(self, client, session, request_de_en, fake_response):
        body = {"translations": [{"text": "one"}, {"text": "two"}]}
        session.request.return_value = fake_response(200, body)
        assert client.translate_text(request_de_en).text == "one"

    @pytest.mark.parametrize(
        "body",
        [
            "{ invalid json }",
            {"translations": []},
            {"translations": [{"detected_source_language": "DE"}]},
            {"result": "Hello"},
        ],
    )
    def test_malformed_response(self, client, session, request_de_en, fake_response, body):
        session.request.return_value = fake_response(200, body)
        with pytest.raises(MachineTranslateError) as excinfo:
            client.translate_text(request_de_en)
        assert excinfo.value.reason is FailureReason.MALFORMED_RESPONSE

    def test_text_too_long_is_rejected_before_sending(self, client, session):
        request = TranslationRequest(text="a" * (128 * 1024 + 1), target_lang="EN-US")
        with pytest.raises(MachineTranslateError) as excinfo:
            client.translate_text(request)
        assert excinfo.value.reason is FailureReason.TEXT_TOO_LONG
        session.request.assert_not_called()

    @pytest.mark.parametrize(
        "status, reason",
        [
            (403, FailureReason.AUTH_FAILED),
            (456, FailureReason.QUOTA_EXCEEDED),
            (400, FailureReason.INVALID_REQUEST),
            (500, FailureReason.SERVER_ERROR),
        ],
    )
    def test_http_errors_are_not_retried(
        self, client, session, request_de_en, fake_response, status, reason
    ):
        session.request.return_value = fake_response(status, {"message": "nope"})
        with pytest.raises(MachineTranslateError) as excinfo:
            client.translate_text(request_de_en)
        assert excinfo.value.reason is reason
        assert excinfo.value.status_code == status
        assert session.request.call_count == 1

    def test_connection_error(self, client, session, request_de_en):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(MachineTranslateError) as excinfo:
            client.translate_text(request_de_en)
        assert excinfo.value.reason is FailureReason.NETWORK_FAILURE


class TestRetries:

    @patch("deepl_connector.services.translation.deepl_client.time.sleep")
    def test_rate_limit_then_success(
        self, mock_sleep, client, session, request_de_en, fake_response, deepl_body
    ):
        session.request.side_effect = [
            fake_response(429, {"message": "Too many requests"}),
            fake_response(529),
            fake_response(200, deepl_body("Hello")),
        ]

        assert client.translate_text(request_de_en).text == "Hello"
        assert session.request.call_count == 3
        assert [c.args[0] for c in mock_sleep.call_args_list] == [2.0, 4.0]

    @patch("deepl_connector.services.translation.deepl_client.time.sleep")
    def test_gives_up_after_max_retries(
        self, mock_sleep, client, session, request_de_en, fake_response
    ):
        session.request.return_value = fake_response(429, {"message": "Too many requests"})

        with pytest.raises(MachineTranslateError) as excinfo:
            client.translate_text(request_de_en)

        assert excinfo.value.reason is FailureReason.RATE_LIMITED
        assert session.request.call_count == 3
        assert mock_sleep.call_count == 2

    @patch("deepl_connector.services.translation.deepl_client.time.sleep")
    def test_retry_after_header_is_honored(
        self, mock_sleep, client, session, request_de_en, fake_response, deepl_body
    ):
        session.request.side_effect = [
            fake_response(503, headers={"Retry-After": "7"}),
            fake_response(200, deepl_body("Hello")),
        ]

        client.translate_text(request_de_en)
        mock_sleep.assert_called_once_with(7.0)

    @patch("deepl_connector.services.translation.deepl_client.time.sleep")
    def test_retry_after_header_is_capped(
        self, mock_sleep, client, session, request_de_en, fake_response, deepl_body
    ):
        session.request.side_effect = [
            fake_response(429, headers={"Retry-After": "3600"}),
            fake_response(200, deepl_body("Hello")),
        ]

        client.translate_text(request_de_en)
        mock_sleep.assert_called_once_with(60.0)


class TestUsage:

    def test_usage(self, client, session, fake_response):
        session.request.return_value = fake_response(
            200, {"character_count": 500000, "character_limit": 500000}
        )

        usage = client.get_usage()

        assert usage.character_count == 500000
        assert usage.limit_reached
        assert session.request.call_args.args == ("GET", "http://localhost:8080/v2/usage")

    def test_usage_malformed(self, client, session, fake_response):
        session.request.return_value = fake_response(200, {"character_count": 1})
        with pytest.raises(MachineTranslateError) as excinfo:
            client.get_usage()
        assert excinfo.value.reason is FailureReason.MALFORMED_RESPONSE


def test_injected_session_is_not_closed(session):
    with DeepLClient(api_key=KEY, base_url=BASE_URL, session=session):
        pass
    session.close.assert_not_called()
