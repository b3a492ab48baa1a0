#!/usr/bin/env python3
"""
Tests for DeepLConfigDialog - API key entry and temporary storage.
"""

import pytest
from PySide6.QtWidgets import QApplication

from deepl_connector.services import API_KEY_NAME, SettingsManager
from deepl_connector.ui import DeepLConfigDialog


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def settings(tmp_path, clean_env):
    return SettingsManager(project_root=tmp_path)


def test_dialog_prefills_stored_key(settings):
    """Existing temporary key should be shown and the checkbox ticked."""
    ensure_qt_app()
    settings.set_credential(API_KEY_NAME, "existing-key", temporary=True)

    dialog = DeepLConfigDialog(settings)

    assert dialog.api_key_field.text() == "existing-key"
    assert dialog.temporary_checkbox.isChecked()
    assert dialog.windowTitle() == "DeepL settings"


def test_dialog_empty_without_key(settings):
    ensure_qt_app()

    dialog = DeepLConfigDialog(settings)

    assert dialog.api_key_field.text() == ""
    assert not dialog.temporary_checkbox.isChecked()


def test_accept_stores_temporary_key(settings, tmp_path):
    ensure_qt_app()
    dialog = DeepLConfigDialog(settings)
    dialog.api_key_field.setText("  new-key:fx  ")
    dialog.temporary_checkbox.setChecked(True)

    dialog.accept()

    assert settings.get_deepl_api_key() == "new-key:fx"
    assert settings.is_credential_stored_temporarily(API_KEY_NAME)
    assert not (tmp_path / ".env").exists()


def test_accept_persists_key(settings, tmp_path):
    ensure_qt_app()
    dialog = DeepLConfigDialog(settings)
    dialog.api_key_field.setText("saved-key")

    dialog.accept()

    assert settings.get_deepl_api_key() == "saved-key"
    assert "saved-key" in (tmp_path / ".env").read_text()


def test_reject_does_not_store(settings):
    ensure_qt_app()
    dialog = DeepLConfigDialog(settings)
    dialog.api_key_field.setText("ignored")

    dialog.reject()

    assert settings.get_deepl_api_key() is None
