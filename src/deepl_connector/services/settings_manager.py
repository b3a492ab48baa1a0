"""Settings Manager - Handles API key and engine configuration."""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv, set_key

logger = logging.getLogger(__name__)

API_KEY_NAME = "DEEPL_API_KEY"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class SettingsManager:
    """
    Manages settings and credentials provided by the host.

    Values are read from a .env file in the project root and from the process
    environment. Credentials can be stored persistently (written back to .env)
    or temporarily (kept in memory for this session only).
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to the directory holding .env.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = Path(project_root)
        self._temporary: Dict[str, str] = {}
        load_dotenv(dotenv_path=self.env_path)

    @property
    def env_path(self) -> Path:
        return self._project_root / ".env"

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a stripped setting, treating blank values as missing."""
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_bool(self, name: str, default: bool) -> bool:
        value = self.get(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning("Ignoring non-boolean value for %s: %r", name, value)
        return default

    def get_float(self, name: str, default: float) -> float:
        value = self.get(name)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Ignoring non-numeric value for %s: %r", name, value)
            return default

    def get_int(self, name: str, default: int) -> int:
        value = self.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Ignoring non-integer value for %s: %r", name, value)
            return default

    def get_credential(self, name: str) -> Optional[str]:
        """Temporary credentials shadow persistent ones."""
        if name in self._temporary:
            return self._temporary[name] or None
        return self.get(name)

    def set_credential(self, name: str, value: str, temporary: bool) -> None:
        """
        Store a credential.

        Args:
            name: Setting name, e.g. DEEPL_API_KEY.
            value: Credential value.
            temporary: Keep in memory only, without touching .env.
        """
        value = value.strip()
        if temporary:
            self._temporary[name] = value
            return

        self._temporary.pop(name, None)
        self.env_path.parent.mkdir(parents=True, exist_ok=True)
        self.env_path.touch(exist_ok=True)
        set_key(str(self.env_path), name, value)
        os.environ[name] = value
        logger.info("Stored %s in %s", name, self.env_path)

    def is_credential_stored_temporarily(self, name: str) -> bool:
        return name in self._temporary

    def get_deepl_api_key(self) -> Optional[str]:
        """Get the DeepL API key from temporary storage or the environment."""
        return self.get_credential(API_KEY_NAME)

    def is_engine_enabled(self) -> bool:
        """Host preference allow_deepl_translate, read from DEEPL_ENABLED."""
        return self.get_bool("DEEPL_ENABLED", True)

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self.env_path, override=True)
