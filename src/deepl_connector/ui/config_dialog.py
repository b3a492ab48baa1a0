"""DeepL configuration dialog - API key entry for the host's engine settings."""

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
)

from deepl_connector.services import API_KEY_NAME, SettingsManager


class DeepLConfigDialog(QDialog):
    """Dialog to enter the DeepL API key.

    The key can be saved to .env or kept for the current session only
    ("temporary"). Free-tier keys end with ``:fx``.
    """

    def __init__(self, settings: SettingsManager, engine_name: str = "DeepL", parent=None):
        super().__init__(parent)
        self.settings = settings
        self.setWindowTitle(f"{engine_name} settings")
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.api_key_field = QLineEdit()
        self.api_key_field.setEchoMode(QLineEdit.Password)
        self.api_key_field.setText(self.settings.get_credential(API_KEY_NAME) or "")
        form.addRow(QLabel("DeepL API key:"), self.api_key_field)
        layout.addLayout(form)

        self.temporary_checkbox = QCheckBox("Do not save the key (this session only)")
        self.temporary_checkbox.setChecked(
            self.settings.is_credential_stored_temporarily(API_KEY_NAME)
        )
        layout.addWidget(self.temporary_checkbox)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def accept(self):
        """Store the key, then close."""
        self.on_confirm()
        super().accept()

    def on_confirm(self) -> None:
        key = self.api_key_field.text().strip()
        temporary = self.temporary_checkbox.isChecked()
        self.settings.set_credential(API_KEY_NAME, key, temporary)
