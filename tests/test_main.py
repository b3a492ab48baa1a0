"""Tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from deepl_connector.main import build_parser, main


@pytest.fixture
def mock_session(session):
    with patch("deepl_connector.services.translation.deepl_client.requests.Session", return_value=session):
        yield session


def test_translate_prints_result(tmp_path, clean_env, mock_session, fake_response, deepl_body, capsys):
    mock_session.request.return_value = fake_response(200, deepl_body("Hello World!"))

    code = main([
        "--env-dir", str(tmp_path),
        "translate", "--from", "de-DE", "--to", "en-US", "--key", "k:fx", "source text",
    ])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Hello World!"
    assert mock_session.request.call_args.args[1] == "https://api-free.deepl.com/v2/translate"


def test_translate_writes_file_cache(tmp_path, clean_env, mock_session, fake_response, deepl_body):
    mock_session.request.return_value = fake_response(200, deepl_body("Hello"))
    cache_dir = tmp_path / "cache"

    main([
        "--env-dir", str(tmp_path),
        "translate", "--from", "de", "--to", "en", "--key", "k", "--cache-dir", str(cache_dir), "Hallo",
    ])

    assert (cache_dir / ".deepl-translations-cache.json").exists()


def test_translate_without_key_fails(tmp_path, clean_env, mock_session, capsys):
    code = main(["--env-dir", str(tmp_path), "translate", "--from", "de", "--to", "en", "Hallo"])

    assert code == 1
    assert capsys.readouterr().out == ""
    mock_session.request.assert_not_called()


def test_usage(tmp_path, clean_env, mock_session, fake_response, capsys):
    mock_session.request.return_value = fake_response(
        200, {"character_count": 42, "character_limit": 500000}
    )

    code = main(["--env-dir", str(tmp_path), "usage", "--key", "k"])

    assert code == 0
    assert "42 / 500000 characters used" in capsys.readouterr().out


def test_usage_auth_failure(tmp_path, clean_env, mock_session, fake_response):
    mock_session.request.return_value = fake_response(403, {"message": "Forbidden"})

    assert main(["--env-dir", str(tmp_path), "usage", "--key", "bad"]) == 1


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
