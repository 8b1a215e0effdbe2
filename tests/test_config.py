# tests/test_config.py
"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from promptvault.config import Settings, ensure_data_dir


class TestSettings:
    def test_database_url_from_data_dir(self, tmp_path):
        settings = Settings(DATA_DIR=str(tmp_path), DATABASE_FILENAME="store.db")
        assert settings.database_url == f"sqlite:///{tmp_path / 'store.db'}"

    def test_database_url_override(self):
        settings = Settings(DATABASE_URL="sqlite:///:memory:")
        assert settings.database_url == "sqlite:///:memory:"

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(DEFAULT_VERSION_CLEANUP_THRESHOLD=0)

    def test_cors_origins(self):
        settings = Settings(CORS_ORIGINS="http://localhost:1420, tauri://localhost,")
        assert settings.cors_origins == ["http://localhost:1420", "tauri://localhost"]


class TestEnsureDataDir:
    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "data"

        path = ensure_data_dir(Settings(DATA_DIR=str(target)))

        assert path == target
        assert target.is_dir()
