"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from translate_app.services import SettingsManager


ENV_KEYS = ("TRANSLATE_API_BASE_URL", "TRANSLATE_REQUEST_TIMEOUT")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up translate settings from environment before and after test."""
    old_values = {key: os.environ.pop(key, None) for key in ENV_KEYS}
    yield
    for key, value in old_values.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


def write_env(directory: Path, content: str) -> None:
    (directory / ".env").write_text(content)


class TestSettingsManagerBaseURL:
    """Tests for translation API base URL configuration."""

    def test_defaults_when_env_file_missing(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_base_url() == "https://ftapi.pythonanywhere.com"

    def test_defaults_when_value_empty(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "TRANSLATE_API_BASE_URL=\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_base_url() == SettingsManager.DEFAULT_BASE_URL

    def test_reads_value_from_env_file(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "TRANSLATE_API_BASE_URL=http://localhost:8000\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_base_url() == "http://localhost:8000"

    def test_strips_whitespace(self, temp_env_dir, clean_env):
        os.environ["TRANSLATE_API_BASE_URL"] = "  http://localhost:8000  "
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_base_url() == "http://localhost:8000"

    def test_reload_env_updates_value(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "TRANSLATE_API_BASE_URL=http://old.test\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_base_url() == "http://old.test"

        write_env(temp_env_dir, "TRANSLATE_API_BASE_URL=http://new.test\n")
        settings.reload_env()
        assert settings.get_base_url() == "http://new.test"


class TestSettingsManagerTimeout:
    """Tests for HTTP request timeout configuration."""

    def test_default_timeout(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_request_timeout() == 10.0

    def test_reads_timeout(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "TRANSLATE_REQUEST_TIMEOUT=2.5\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_request_timeout() == 2.5

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_timeout_falls_back_to_default(self, raw, temp_env_dir, clean_env):
        os.environ["TRANSLATE_REQUEST_TIMEOUT"] = raw
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_request_timeout() == SettingsManager.DEFAULT_REQUEST_TIMEOUT
