"""Tests for core.shortcuts."""

from core.shortcuts import SHORTCUTS, Action, KeyChord, find_command_shortcut


class TestFindCommandShortcut:
    def test_ctrl_binding(self):
        sc = find_command_shortcut(KeyChord("l", ctrl=True))
        assert sc.action is Action.TOGGLE_THEME

    def test_cmd_binding(self):
        sc = find_command_shortcut(KeyChord(";", meta=True))
        assert sc.action is Action.TOGGLE_CHAR_LIMIT

    def test_requires_modifier(self):
        assert find_command_shortcut(KeyChord("l")) is None

    def test_unbound(self):
        assert find_command_shortcut(KeyChord("q", ctrl=True)) is None

    def test_copy_and_clear_respect_selection(self):
        guarded = {s.action for s in SHORTCUTS if s.needs_empty_selection}
        assert guarded == {Action.COPY_TEXT, Action.CLEAR_TEXT}


class TestShortcutTable:
    def test_every_action_is_documented(self):
        documented = {s.action for s in SHORTCUTS if s.action is not None}
        assert documented == set(Action)

    def test_command_keys_are_unique(self):
        keys = [s.key for s in SHORTCUTS if s.key]
        assert len(keys) == len(set(keys))
