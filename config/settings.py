"""Application-wide settings backed by QSettings.

Only presentation defaults and window chrome live here; the text and the
toggles of a session are never written back.

Usage:
    from config.settings import AppSettings
    settings = AppSettings()
    wpm = settings.words_per_minute
"""

import logging
import os
from pathlib import Path

from platformdirs import user_documents_dir
from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

APP_NAME = "CharacterCounter"
APP_ORG = "CharacterCounter"


class AppSettings:
    """Thin wrapper around QSettings with typed property accessors."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings(APP_ORG, APP_NAME)

    def _int(self, key: str, default: int, env: str | None = None) -> int:
        raw = os.environ.get(env) if env else None
        if raw is None:
            raw = self._qs.value(key, default)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("Invalid value %r for %s; using %d", raw, key, default)
            return default
        if value <= 0:
            logger.warning("Non-positive value %d for %s; using %d", value, key, default)
            return default
        return value

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    @property
    def words_per_minute(self) -> int:
        return self._int("analysis/words_per_minute", 225, env="CHARCOUNTER_WPM")

    @words_per_minute.setter
    def words_per_minute(self, value: int) -> None:
        self._qs.setValue("analysis/words_per_minute", int(value))

    @property
    def default_char_limit(self) -> int:
        return self._int("analysis/default_char_limit", 280)

    @default_char_limit.setter
    def default_char_limit(self, value: int) -> None:
        self._qs.setValue("analysis/default_char_limit", int(value))

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------

    @property
    def start_theme(self) -> str:
        raw = os.environ.get("CHARCOUNTER_THEME", self._qs.value("ui/start_theme", "dark"))
        theme = str(raw).lower()
        if theme not in ("light", "dark"):
            logger.warning("Unknown theme %r; using dark", raw)
            return "dark"
        return theme

    @start_theme.setter
    def start_theme(self, value: str) -> None:
        self._qs.setValue("ui/start_theme", value)

    @property
    def top_letters(self) -> int:
        return self._int("ui/top_letters", 5)

    @property
    def copy_feedback_ms(self) -> int:
        return self._int("ui/copy_feedback_ms", 2000)

    @property
    def focus_delay_ms(self) -> int:
        return self._int("ui/focus_delay_ms", 10)

    @property
    def overlay_focus_delay_ms(self) -> int:
        return self._int("ui/overlay_focus_delay_ms", 50)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    @property
    def last_open_dir(self) -> Path:
        raw = self._qs.value("files/last_open_dir", "")
        return Path(raw) if raw else Path(user_documents_dir())

    @last_open_dir.setter
    def last_open_dir(self, value: Path) -> None:
        self._qs.setValue("files/last_open_dir", str(value))

    # ------------------------------------------------------------------
    # Window geometry
    # ------------------------------------------------------------------

    @property
    def window_geometry(self) -> bytes | None:
        val = self._qs.value("window/geometry")
        return bytes(val) if val else None

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("window/geometry", value)

    def sync(self) -> None:
        self._qs.sync()
