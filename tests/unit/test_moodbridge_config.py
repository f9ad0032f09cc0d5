"""
Unit tests for moodbridge.core.config.
"""
from pathlib import Path

import pytest
from pydantic import ValidationError

from moodbridge.core.config import DEFAULT_NOTE_GLOB, Settings


def make_settings(**kwargs):
    """Create Settings without loading values from .env."""
    return Settings(_env_file=None, **kwargs)


class TestSettingsDefaults:

    def test_defaults_match_notion_export(self):
        settings = make_settings()

        assert settings.note_glob == DEFAULT_NOTE_GLOB == "ML *.md"
        assert settings.journal == "Journal"
        assert settings.marker_tag == "from-notion"
        assert settings.starred is False
        assert settings.dayone_binary == "dayone2"
        assert settings.stop_on_error is True
        assert settings.dry_run is False

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("MOODBRIDGE_JOURNAL", "Moods")
        monkeypatch.setenv("MOODBRIDGE_STOP_ON_ERROR", "false")
        monkeypatch.setenv("MOODBRIDGE_EXPORT_DIR", "/tmp/export")

        settings = make_settings()

        assert settings.journal == "Moods"
        assert settings.stop_on_error is False
        assert settings.export_dir == Path("/tmp/export")


class TestSettingsValidation:

    def test_empty_journal_means_default_journal(self):
        assert make_settings(journal="  ").journal is None

    @pytest.mark.parametrize("field", ["note_glob", "dayone_binary"])
    def test_rejects_blank_values(self, field):
        with pytest.raises(ValidationError):
            make_settings(**{field: "   "})

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(dayone_timeout_seconds=timeout)

        assert "DAYONE_TIMEOUT_SECONDS" in str(exc_info.value)
