"""Keyboard shortcut table.

A single list drives both dispatch and the help overlay, so what the
overlay shows is always what the keyboard does.
"""

from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    TOGGLE_THEME = "toggle_theme"
    TOGGLE_EXCLUDE_SPACES = "toggle_exclude_spaces"
    COPY_TEXT = "copy_text"
    CLEAR_TEXT = "clear_text"
    TOGGLE_SHORTCUTS = "toggle_shortcuts_overlay"
    TOGGLE_ALL_LETTERS = "toggle_show_all_letters"
    TOGGLE_CHAR_LIMIT = "toggle_char_limit"
    CLOSE_SHORTCUTS = "close_shortcuts_overlay"


@dataclass(frozen=True)
class KeyChord:
    """A key press as reported by the host.

    ``key`` is the produced character (``"l"``, ``"?"``, ``";"``) or a
    named key (``"Escape"``, ``"Tab"``).  ``meta`` is the Cmd key on macOS.
    """

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    alt: bool = False

    @property
    def command(self) -> bool:
        return self.ctrl or self.meta


@dataclass(frozen=True)
class Shortcut:
    label: str
    description: str
    action: Action | None = None
    key: str | None = None              # lowercase key for Ctrl/Cmd chords
    needs_empty_selection: bool = False


SHORTCUTS: list[Shortcut] = [
    Shortcut("Tab / Shift+Tab", "Navigate between interactive elements"),
    Shortcut("Enter / Space", "Activate buttons or toggle checkboxes"),
    Shortcut("Ctrl/Cmd + L", "Toggle Light/Dark Mode", Action.TOGGLE_THEME, "l"),
    Shortcut("Ctrl/Cmd + E", "Toggle Exclude Spaces", Action.TOGGLE_EXCLUDE_SPACES, "e"),
    Shortcut("Ctrl/Cmd + C", "Copy Text", Action.COPY_TEXT, "c", needs_empty_selection=True),
    Shortcut("Ctrl/Cmd + X", "Clear Text", Action.CLEAR_TEXT, "x", needs_empty_selection=True),
    Shortcut("Ctrl/Cmd + K", "Show/Hide Keyboard Shortcuts", Action.TOGGLE_SHORTCUTS, "k"),
    Shortcut("Ctrl/Cmd + M", "Show/Hide All Letters", Action.TOGGLE_ALL_LETTERS, "m"),
    Shortcut("Ctrl/Cmd + ;", "Toggle Character Limit", Action.TOGGLE_CHAR_LIMIT, ";"),
    Shortcut("Shift + ?", "Show/Hide Keyboard Shortcuts", Action.TOGGLE_SHORTCUTS),
    Shortcut("Escape", "Close Keyboard Shortcuts", Action.CLOSE_SHORTCUTS),
]

_COMMAND_BINDINGS: dict[str, Shortcut] = {s.key: s for s in SHORTCUTS if s.key}


def find_command_shortcut(chord: KeyChord) -> Shortcut | None:
    """Return the Ctrl/Cmd binding for *chord*, if any."""
    if not chord.command:
        return None
    return _COMMAND_BINDINGS.get(chord.key.lower())
