"""UI layer - PySide6 widgets the host shows for this connector."""

from .config_dialog import DeepLConfigDialog

__all__ = ["DeepLConfigDialog"]
