"""Unit tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from pokido.utils.config import Settings, ensure_album_dir, resolve_album_path


class TestSettings:
    """Test Settings class configuration."""

    def test_settings_default_values(self):
        """Test that Settings has correct default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.GEMINI_API_KEY is None
        assert settings.GEMINI_MODEL == "gemini-2.0-flash"
        assert settings.POKEMON_TCG_API_KEY is None
        assert settings.CATALOG_TIMEOUT_S == 10.0
        assert settings.IMAGE_FALLBACK_TIMEOUT_S == 5.0
        assert settings.NEAR_NUMBER_TOLERANCE == 5
        assert settings.DEFAULT_LANGUAGE == "he"
        assert settings.EUR_TO_LOCAL_RATE == 4.0
        assert settings.USD_TO_LOCAL_RATE == 3.5
        assert settings.LOG_LEVEL == "INFO"
        assert settings.ALBUM_DB_PATH == "cache/album.db"

    def test_settings_from_environment(self):
        """Test that Settings can be configured from environment variables."""
        with patch.dict(os.environ, {
            "GEMINI_API_KEY": "gemini_key",
            "GEMINI_MODEL": "gemini-1.5-pro",
            "NEAR_NUMBER_TOLERANCE": "8",
            "CATALOG_TIMEOUT_S": "2.5",
            "DEFAULT_LANGUAGE": "en",
            "ALBUM_DB_PATH": "custom/album.db",
        }):
            settings = Settings(_env_file=None)

        assert settings.GEMINI_API_KEY == "gemini_key"
        assert settings.GEMINI_MODEL == "gemini-1.5-pro"
        assert settings.NEAR_NUMBER_TOLERANCE == 8
        assert settings.CATALOG_TIMEOUT_S == 2.5
        assert settings.DEFAULT_LANGUAGE == "en"
        assert settings.ALBUM_DB_PATH == "custom/album.db"

    def test_settings_case_insensitive(self):
        """Test that Settings is case insensitive."""
        with patch.dict(os.environ, {"log_level": "WARNING", "gemini_model": "gemini-x"}):
            settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "WARNING"
        assert settings.GEMINI_MODEL == "gemini-x"

    def test_settings_validation(self):
        """Test that Settings validates input types."""
        with patch.dict(os.environ, {"NEAR_NUMBER_TOLERANCE": "not_a_number"}):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        """Test configuration loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=from_file\nDEFAULT_LANGUAGE=en\n")

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=str(env_file))

        assert settings.GEMINI_API_KEY == "from_file"
        assert settings.DEFAULT_LANGUAGE == "en"


class TestEdgeCases:
    """Test edge cases and error conditions."""

    def test_empty_environment_variables(self):
        """Test handling of empty environment variables."""
        with patch.dict(os.environ, {
            "LOG_LEVEL": "",
            "ALBUM_DB_PATH": "",
            "GEMINI_API_KEY": "",
            "POKEMON_TCG_API_KEY": "",
        }):
            settings = Settings(_env_file=None)

        assert settings.GEMINI_API_KEY is None
        assert settings.POKEMON_TCG_API_KEY is None
        assert settings.LOG_LEVEL == "INFO"
        assert settings.ALBUM_DB_PATH == "cache/album.db"

    def test_whitespace_environment_variables(self):
        """Test handling of whitespace-only environment variables."""
        with patch.dict(os.environ, {"GEMINI_API_KEY": "  ", "LOG_LEVEL": " \t "}):
            settings = Settings(_env_file=None)

        assert settings.GEMINI_API_KEY is None
        assert settings.LOG_LEVEL == "INFO"

    @pytest.mark.parametrize("value, expected", [
        ("EN", "en"),
        (" he ", "he"),
        ("fr", "he"),
        ("", "he"),
    ])
    def test_default_language_normalized(self, value, expected):
        with patch.dict(os.environ, {"DEFAULT_LANGUAGE": value}):
            assert Settings(_env_file=None).DEFAULT_LANGUAGE == expected


class TestAlbumPath:
    """Test album database path helpers."""

    def test_absolute_path_kept(self, tmp_path):
        target = tmp_path / "album.db"
        assert resolve_album_path(str(target)) == target

    def test_relative_path_under_project_root(self):
        path = resolve_album_path("cache/album.db")

        assert path.is_absolute()
        assert path.parts[-2:] == ("cache", "album.db")
        assert (path.parent.parent / "pokido").is_dir()

    def test_default_from_settings(self):
        with patch("pokido.utils.config.settings") as mock_settings:
            mock_settings.ALBUM_DB_PATH = "elsewhere/album.db"
            path = resolve_album_path()

        assert path.parts[-2:] == ("elsewhere", "album.db")

    def test_ensure_album_dir_creates_parent(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "album.db"

        result = ensure_album_dir(str(target))

        assert result == target
        assert target.parent.is_dir()
        assert not target.exists()

    def test_ensure_album_dir_existing(self, tmp_path):
        assert ensure_album_dir(str(tmp_path / "album.db")) == Path(tmp_path / "album.db")
