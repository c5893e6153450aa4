"""Settings Manager - Handles translation API configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages translation API settings.

    Reads values from a .env file in the project root, falling back to
    the public API defaults.
    """

    DEFAULT_BASE_URL = "https://ftapi.pythonanywhere.com"
    DEFAULT_REQUEST_TIMEOUT = 10.0

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_base_url(self) -> str:
        """Get the translation API base URL from environment."""
        url = os.getenv("TRANSLATE_API_BASE_URL")
        return url.strip() if url and url.strip() else self.DEFAULT_BASE_URL

    def get_request_timeout(self) -> float:
        """Get the HTTP request timeout in seconds from environment."""
        raw = os.getenv("TRANSLATE_REQUEST_TIMEOUT")
        if not raw or not raw.strip():
            return self.DEFAULT_REQUEST_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            print(f"DEBUG: Ignoring invalid TRANSLATE_REQUEST_TIMEOUT={raw!r}")
            return self.DEFAULT_REQUEST_TIMEOUT
        return timeout if timeout > 0 else self.DEFAULT_REQUEST_TIMEOUT

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
