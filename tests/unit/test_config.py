"""Unit tests for configuration module."""

import pytest

from mbox_reader.config import Settings, get_settings


class TestSettings:
    """Test suite for Settings class."""

    def test_default_settings(self) -> None:
        """Test that default settings are properly initialized."""
        settings = Settings()

        assert settings.archive_encoding == "utf-8"
        assert settings.archive_errors == "replace"
        assert settings.preview_length == 100
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.debug is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading settings from environment variables."""
        monkeypatch.setenv("MBOX_READER_LOG_LEVEL", "debug")
        monkeypatch.setenv("MBOX_READER_PREVIEW_LENGTH", "40")
        monkeypatch.setenv("MBOX_READER_DEBUG", "true")

        # Clear the cache to ensure fresh settings
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.preview_length == 40
        assert settings.debug is True

        # Clean up
        get_settings.cache_clear()

    def test_invalid_log_level_rejected(self) -> None:
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_negative_preview_length_rejected(self) -> None:
        """Test that preview length cannot be negative."""
        with pytest.raises(ValueError):
            Settings(preview_length=-1)

    def test_get_settings_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

        # Clean up
        get_settings.cache_clear()
