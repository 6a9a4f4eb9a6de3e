"""Tests for Settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from signed_store.settings import Settings, settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_values(self):
        """Test default Settings values when env vars/files are not set."""
        with patch.dict(os.environ, clear=True):
            s = Settings(_env_file=None)
        assert s.now_override is None
        assert s.log_level == "INFO"

    @patch.dict(os.environ, {"SIGNED_STORE_NOW_OVERRIDE": "1000", "SIGNED_STORE_LOG_LEVEL": "DEBUG"})
    def test_env_variable_loading(self):
        """Test loading settings from environment variables."""
        s = Settings()
        assert s.now_override == 1000
        assert s.log_level == "DEBUG"

    @patch.dict(os.environ, {"NOW_OVERRIDE": "5", "UNKNOWN_SETTING": "should-be-ignored"}, clear=True)
    def test_unprefixed_and_unknown_env_ignored(self):
        """Only SIGNED_STORE_ prefixed variables are read (extra="ignore")."""
        s = Settings(_env_file=None)
        assert s.now_override is None
        assert not hasattr(s, "unknown_setting")

    def test_settings_singleton(self):
        """Test that the module provides a settings singleton."""
        assert isinstance(settings, Settings)

        from signed_store.settings import settings as settings2

        assert settings is settings2

    def test_env_file_loading(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading from .env file."""
        (tmp_path / ".env").write_text("SIGNED_STORE_NOW_OVERRIDE=42\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SIGNED_STORE_NOW_OVERRIDE", raising=False)

        assert Settings().now_override == 42

    def test_frozen(self):
        s = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            s.log_level = "DEBUG"  # type: ignore[misc]

    def test_invalid_now_override(self):
        with patch.dict(os.environ, {"SIGNED_STORE_NOW_OVERRIDE": "yesterday"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestStoreClock:
    def test_store_uses_settings_override(self, monkeypatch: pytest.MonkeyPatch):
        from signed_store.document_store import _base
        from signed_store.document_store.memory import MemoryDocumentStore

        monkeypatch.setattr(_base, "settings", Settings(now_override=123, _env_file=None))
        assert MemoryDocumentStore("+x.y").now == 123
        assert MemoryDocumentStore("+x.y", now=7).now == 7
