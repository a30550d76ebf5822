"""Tests for config.settings (QSettings backed by a temporary .ini file)."""

import pytest
from PyQt6.QtCore import QSettings

from config.settings import AppSettings


@pytest.fixture
def settings(tmp_path, monkeypatch):
    monkeypatch.delenv("CHARCOUNTER_WPM", raising=False)
    monkeypatch.delenv("CHARCOUNTER_THEME", raising=False)
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return AppSettings(qs)


class TestDefaults:
    def test_analysis_defaults(self, settings):
        assert settings.words_per_minute == 225
        assert settings.default_char_limit == 280

    def test_ui_defaults(self, settings):
        assert settings.start_theme == "dark"
        assert settings.top_letters == 5
        assert settings.copy_feedback_ms == 2000
        assert settings.focus_delay_ms == 10
        assert settings.overlay_focus_delay_ms == 50

    def test_no_geometry(self, settings):
        assert settings.window_geometry is None


class TestOverrides:
    def test_stored_value(self, settings):
        settings.words_per_minute = 300
        assert settings.words_per_minute == 300

    def test_env_beats_stored(self, settings, monkeypatch):
        settings.words_per_minute = 300
        monkeypatch.setenv("CHARCOUNTER_WPM", "180")
        assert settings.words_per_minute == 180

    def test_invalid_number_falls_back(self, settings, monkeypatch):
        monkeypatch.setenv("CHARCOUNTER_WPM", "fast")
        assert settings.words_per_minute == 225

    def test_non_positive_falls_back(self, settings):
        settings.default_char_limit = 0
        assert settings.default_char_limit == 280

    def test_theme_env(self, settings, monkeypatch):
        monkeypatch.setenv("CHARCOUNTER_THEME", "Light")
        assert settings.start_theme == "light"

    def test_unknown_theme(self, settings):
        settings.start_theme = "sepia"
        assert settings.start_theme == "dark"

    def test_last_open_dir_round_trip(self, settings, tmp_path):
        settings.last_open_dir = tmp_path
        assert settings.last_open_dir == tmp_path
