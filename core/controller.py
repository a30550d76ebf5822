"""Interaction controller: owns the buffer, analysis config and UI state.

Every mutation goes through a method here.  Buffer and config changes
are followed immediately by a synchronous :func:`recompute`; UI-only
changes never touch the statistics.  Focus moves and the copy-feedback
revert are deferred through the injected :class:`Scheduler` and are
cancelled on :meth:`InteractionController.teardown`.

Usage:
    controller = InteractionController(scheduler, focus, selection, clipboard,
                                       on_change=render)
    controller.set_text("Hello. World!")
    controller.stats.sentence_count   # 2
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from core.host import Clipboard, FocusQuery, Scheduler, SelectionQuery, TaskHandle
from core.shortcuts import Action, KeyChord, find_command_shortcut
from core.stats_engine import (
    DEFAULT_WORDS_PER_MINUTE,
    AnalysisConfig,
    DerivedStats,
    LetterStat,
    recompute,
)

logger = logging.getLogger(__name__)

SAMPLE_TEXT = (
    "Design is the silent ambassador of your brand. Simplicity is key to effective "
    "communication, creating clarity in every interaction. A great design transforms "
    "complex ideas into elegant solutions, making them easy to understand. It blends "
    "aesthetics and functionality seamlessly."
)

DEFAULT_CHAR_LIMIT = 280
DEFAULT_TOP_LETTERS = 5
COPY_FEEDBACK_MS = 2000
FOCUS_DELAY_MS = 10
OVERLAY_FOCUS_DELAY_MS = 50

# Focus targets resolved through FocusQuery.lookup()
TEXT_INPUT = "text_input"
CHAR_LIMIT_INPUT = "char_limit_input"
OVERLAY_CLOSE = "overlay_close"
SHORTCUTS_BUTTON = "shortcuts_button"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class CopyFeedback(str, Enum):
    IDLE = ""
    COPIED = "Copied!"
    FAILED = "Copy failed"


class Change(str, Enum):
    """What the host has to re-render after a notification."""

    TEXT = "text"
    STATS = "stats"
    CONFIG = "config"
    UI = "ui"
    FEEDBACK = "feedback"


@dataclass(frozen=True)
class UIState:
    theme: Theme = Theme.DARK
    show_all_letters: bool = False
    shortcuts_modal_open: bool = False
    focus_trap_active: bool = False


def parse_char_limit(raw: str | int | None) -> int | None:
    """Read a leading integer from user input; None when there is none.

    ``"300"`` -> 300, ``" 42 chars"`` -> 42, ``"3.7"`` -> 3, ``"abc"`` -> None.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT_RE.match(raw)
    return int(m.group(1)) if m else None


class InteractionController:
    """State-mutation layer between the host widgets and the stats engine."""

    def __init__(
        self,
        scheduler: Scheduler,
        focus: FocusQuery,
        selection: SelectionQuery,
        clipboard: Clipboard,
        *,
        text: str = SAMPLE_TEXT,
        theme: Theme = Theme.DARK,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        default_char_limit: int = DEFAULT_CHAR_LIMIT,
        top_letters: int = DEFAULT_TOP_LETTERS,
        copy_feedback_ms: int = COPY_FEEDBACK_MS,
        focus_delay_ms: int = FOCUS_DELAY_MS,
        overlay_focus_delay_ms: int = OVERLAY_FOCUS_DELAY_MS,
        on_change: Callable[[Change], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._focus = focus
        self._selection = selection
        self._clipboard = clipboard
        self._on_change = on_change

        self._words_per_minute = words_per_minute
        self._default_char_limit = default_char_limit
        self._top_letters = top_letters
        self._copy_feedback_ms = copy_feedback_ms
        self._focus_delay_ms = focus_delay_ms
        self._overlay_focus_delay_ms = overlay_focus_delay_ms

        self._text = text
        self._exclude_spaces = False
        self._limit_enabled = False
        self._limit_value: int | None = None
        self._ui = UIState(theme=theme)
        self._copy_feedback = CopyFeedback.IDLE

        self._overlay_opener: Any | None = None
        self._focus_task: TaskHandle | None = None
        self._feedback_task: TaskHandle | None = None
        self._torn_down = False

        self._stats = recompute(self._text, self.config, self._words_per_minute)

        self._actions: dict[Action, Callable[[], None]] = {
            Action.TOGGLE_THEME: self.toggle_theme,
            Action.TOGGLE_EXCLUDE_SPACES: self.toggle_exclude_spaces,
            Action.COPY_TEXT: self.copy_text_to_clipboard,
            Action.CLEAR_TEXT: self.clear_text,
            Action.TOGGLE_SHORTCUTS: self.toggle_shortcuts_overlay,
            Action.TOGGLE_ALL_LETTERS: self.toggle_show_all_letters,
            Action.TOGGLE_CHAR_LIMIT: self.toggle_char_limit,
            Action.CLOSE_SHORTCUTS: self.close_shortcuts_overlay,
        }

    # ------------------------------------------------------------------
    # Read-only state for rendering
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def config(self) -> AnalysisConfig:
        limit = self._limit_value if self._limit_enabled else None
        return AnalysisConfig(exclude_spaces=self._exclude_spaces, char_limit=limit)

    @property
    def stats(self) -> DerivedStats:
        return self._stats

    @property
    def ui(self) -> UIState:
        return self._ui

    @property
    def char_limit_enabled(self) -> bool:
        return self._limit_enabled

    @property
    def char_limit_value(self) -> int | None:
        """The remembered limit, kept while the feature is switched off."""
        return self._limit_value

    @property
    def copy_feedback(self) -> CopyFeedback:
        return self._copy_feedback

    @property
    def displayed_letters(self) -> tuple[LetterStat, ...]:
        if self._ui.show_all_letters:
            return self._stats.letter_frequencies
        return self._stats.letter_frequencies[: self._top_letters]

    @property
    def has_more_letters(self) -> bool:
        return (
            not self._ui.show_all_letters
            and len(self._stats.letter_frequencies) > self._top_letters
        )

    # ------------------------------------------------------------------
    # Buffer and configuration
    # ------------------------------------------------------------------

    def set_text(self, text: str) -> None:
        """Host-side edit; the host already shows *text*, so only stats change."""
        self._text = text
        self._refresh_stats()

    def clear_text(self) -> None:
        self._text = ""
        self._notify(Change.TEXT)
        self._refresh_stats()
        self._schedule_focus(self._focus_delay_ms, lambda: self._focus.lookup(TEXT_INPUT))

    def toggle_exclude_spaces(self) -> None:
        self._exclude_spaces = not self._exclude_spaces
        self._notify(Change.CONFIG)
        self._refresh_stats()

    def toggle_char_limit(self) -> None:
        self._limit_enabled = not self._limit_enabled
        if self._limit_enabled and self._limit_value is None:
            self._limit_value = self._default_char_limit
        self._notify(Change.CONFIG)
        self._refresh_stats()
        if self._limit_enabled:
            self._schedule_focus(
                self._focus_delay_ms, lambda: self._focus.lookup(CHAR_LIMIT_INPUT)
            )

    def set_char_limit(self, value: str | int | None) -> None:
        parsed = parse_char_limit(value)
        if parsed is None and value not in (None, ""):
            logger.debug("Ignoring non-numeric character limit %r", value)
        self._limit_value = parsed
        self._notify(Change.CONFIG)
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        self._stats = recompute(self._text, self.config, self._words_per_minute)
        self._notify(Change.STATS)

    # ------------------------------------------------------------------
    # UI-only toggles
    # ------------------------------------------------------------------

    def toggle_theme(self) -> None:
        self._ui = replace(self._ui, theme=self._ui.theme.flipped())
        logger.debug("Theme -> %s", self._ui.theme.value)
        self._notify(Change.UI)

    def toggle_show_all_letters(self) -> None:
        self._ui = replace(self._ui, show_all_letters=not self._ui.show_all_letters)
        self._notify(Change.UI)

    def toggle_shortcuts_overlay(self, opener: Any | None = None) -> None:
        if self._ui.shortcuts_modal_open:
            self.close_shortcuts_overlay()
        else:
            self.open_shortcuts_overlay(opener)

    def open_shortcuts_overlay(self, opener: Any | None = None) -> None:
        if self._ui.shortcuts_modal_open:
            return
        if opener is None:
            opener = self._focus.active_element() or self._focus.lookup(SHORTCUTS_BUTTON)
        self._overlay_opener = opener
        self._ui = replace(self._ui, shortcuts_modal_open=True, focus_trap_active=True)
        self._notify(Change.UI)
        self._schedule_focus(
            self._overlay_focus_delay_ms, lambda: self._focus.lookup(OVERLAY_CLOSE)
        )

    def close_shortcuts_overlay(self) -> None:
        if not self._ui.shortcuts_modal_open:
            return
        opener, self._overlay_opener = self._overlay_opener, None
        self._ui = replace(self._ui, shortcuts_modal_open=False, focus_trap_active=False)
        self._notify(Change.UI)
        self._schedule_focus(self._overlay_focus_delay_ms, lambda: opener)

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy_text_to_clipboard(self) -> None:
        self._clipboard.write_text(self._text, self._on_copy_done)

    def _on_copy_done(self, success: bool) -> None:
        if self._torn_down:
            return
        if success:
            self._copy_feedback = CopyFeedback.COPIED
        else:
            logger.warning("Clipboard write was rejected")
            self._copy_feedback = CopyFeedback.FAILED
        self._notify(Change.FEEDBACK)

        if self._feedback_task is not None:
            self._feedback_task.cancel()
        self._feedback_task = self._scheduler.call_later(
            self._copy_feedback_ms, self._reset_copy_feedback
        )

    def _reset_copy_feedback(self) -> None:
        self._feedback_task = None
        self._copy_feedback = CopyFeedback.IDLE
        self._notify(Change.FEEDBACK)

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def perform(self, action: Action) -> None:
        logger.debug("Action: %s", action.value)
        self._actions[action]()

    def handle_key(self, chord: KeyChord) -> bool:
        """Dispatch a global key press.

        Returns True when the press was consumed and the host should
        suppress its default handling.
        """
        if chord.command:
            shortcut = find_command_shortcut(chord)
            if shortcut is None:
                return False
            if shortcut.needs_empty_selection and self._selection.has_selection():
                return False
            self.perform(shortcut.action)
            return True

        if chord.key == "?" and chord.shift:
            self.perform(Action.TOGGLE_SHORTCUTS)
            return True

        if chord.key == "Escape":
            if not self._ui.shortcuts_modal_open:
                return False
            self.perform(Action.CLOSE_SHORTCUTS)
            return True

        if chord.key == "Tab" and self._ui.focus_trap_active:
            self._cycle_overlay_focus(backwards=chord.shift)
            return True

        return False

    def _cycle_overlay_focus(self, backwards: bool) -> None:
        elements = self._focus.overlay_focusables()
        if not elements:
            return
        active = self._focus.active_element()
        index = next((i for i, el in enumerate(elements) if el == active), None)
        if index is None:
            target = elements[-1] if backwards else elements[0]
        else:
            step = -1 if backwards else 1
            target = elements[(index + step) % len(elements)]
        self._focus.focus(target)

    # ------------------------------------------------------------------
    # Deferred focus & lifecycle
    # ------------------------------------------------------------------

    def _schedule_focus(self, delay_ms: int, resolve: Callable[[], Any | None]) -> None:
        # Only the latest focus request matters.
        if self._focus_task is not None:
            self._focus_task.cancel()

        def _move() -> None:
            self._focus_task = None
            target = resolve()
            if target is None or not self._focus.focus(target):
                logger.debug("Focus target gone before deferred move; skipping")

        self._focus_task = self._scheduler.call_later(delay_ms, _move)

    def teardown(self) -> None:
        """Cancel every pending callback; later completions are ignored."""
        self._torn_down = True
        for task in (self._focus_task, self._feedback_task):
            if task is not None:
                task.cancel()
        self._focus_task = None
        self._feedback_task = None

    def _notify(self, change: Change) -> None:
        if self._on_change is not None:
            self._on_change(change)
