"""Qt implementations of the controller's host capabilities."""

import logging
from collections.abc import Callable

from PyQt6 import sip
from PyQt6.QtCore import QObject, Qt, QTimer
from PyQt6.QtGui import QClipboard, QKeyEvent
from PyQt6.QtWidgets import QApplication, QLineEdit, QPlainTextEdit, QTextEdit, QWidget

from core.host import Clipboard, FocusQuery, Scheduler, SelectionQuery, TaskHandle
from core.shortcuts import KeyChord

logger = logging.getLogger(__name__)


def _alive(widget: QWidget | None) -> bool:
    return widget is not None and not sip.isdeleted(widget)


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------

class _TimerHandle(TaskHandle):
    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def pending(self) -> bool:
        return self._timer is not None and not sip.isdeleted(self._timer)

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None and not sip.isdeleted(timer):
            timer.stop()
            timer.deleteLater()

    def _fire(self, callback: Callable[[], None]) -> None:
        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        timer.deleteLater()
        callback()


class QtScheduler(Scheduler):
    """Single-shot QTimers parented to *owner*; they die with it."""

    def __init__(self, owner: QObject) -> None:
        self._owner = owner

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        timer = QTimer(self._owner)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = _TimerHandle(timer)
        timer.timeout.connect(lambda: handle._fire(callback))
        timer.start()
        return handle


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------

class QtClipboard(Clipboard):
    """Writes through QClipboard and reports back on the next event-loop turn."""

    def __init__(self, clipboard: QClipboard, scheduler: Scheduler) -> None:
        self._clipboard = clipboard
        self._scheduler = scheduler

    def write_text(self, text: str, on_done: Callable[[bool], None]) -> None:
        self._clipboard.setText(text)
        # Some platforms silently refuse; read back to find out.
        ok = self._clipboard.text() == text
        if not ok:
            logger.debug("Clipboard read-back did not match (%d chars)", len(text))
        self._scheduler.call_later(0, lambda: on_done(ok))


# ---------------------------------------------------------------------------
# Focus & selection
# ---------------------------------------------------------------------------

class WidgetFocusQuery(FocusQuery):
    """Focus queries over a fixed set of named widgets and one overlay."""

    def __init__(self, overlay: QWidget, controls: dict[str, QWidget]) -> None:
        self._overlay = overlay
        self._controls = controls

    def active_element(self) -> QWidget | None:
        return QApplication.focusWidget()

    def overlay_focusables(self) -> list[QWidget]:
        overlay = self._overlay
        if not _alive(overlay) or not overlay.isVisible():
            return []
        found: list[QWidget] = []
        w = overlay.nextInFocusChain()
        while w is not None and w is not overlay:
            if (
                overlay.isAncestorOf(w)
                and w.isVisible()
                and w.isEnabled()
                and w.focusPolicy().value & Qt.FocusPolicy.TabFocus.value
            ):
                found.append(w)
            w = w.nextInFocusChain()
        return found

    def lookup(self, name: str) -> QWidget | None:
        widget = self._controls.get(name)
        if not _alive(widget) or not widget.isVisible():
            return None
        return widget

    def focus(self, element: QWidget) -> bool:
        if not _alive(element) or not element.isVisible() or not element.isEnabled():
            return False
        element.setFocus(Qt.FocusReason.TabFocusReason)
        return True


def _widget_has_selection(widget: QWidget) -> bool:
    if isinstance(widget, (QPlainTextEdit, QTextEdit)):
        return widget.textCursor().hasSelection()
    if isinstance(widget, QLineEdit):
        return widget.hasSelectedText()
    return False


class EditorSelectionQuery(SelectionQuery):
    """Selection in the given text widgets or in whatever has focus."""

    def __init__(self, *widgets: QWidget) -> None:
        self._widgets = widgets

    def has_selection(self) -> bool:
        candidates = [*self._widgets, QApplication.focusWidget()]
        return any(_alive(w) and _widget_has_selection(w) for w in candidates)


# ---------------------------------------------------------------------------
# Key events
# ---------------------------------------------------------------------------

_NAMED_KEYS = {
    Qt.Key.Key_Tab.value: "Tab",
    Qt.Key.Key_Backtab.value: "Tab",
    Qt.Key.Key_Escape.value: "Escape",
}

_PUNCTUATION_KEYS = {
    Qt.Key.Key_Semicolon.value: ";",
    Qt.Key.Key_Question.value: "?",
}


def chord_from_event(event: QKeyEvent) -> KeyChord | None:
    """Translate a key press into a :class:`KeyChord`; None for bare modifiers."""
    key = event.key()
    mods = event.modifiers()
    shift = bool(mods & Qt.KeyboardModifier.ShiftModifier)

    if key in _NAMED_KEYS:
        name = _NAMED_KEYS[key]
        shift = shift or key == Qt.Key.Key_Backtab.value
    elif key in _PUNCTUATION_KEYS:
        name = _PUNCTUATION_KEYS[key]
    elif Qt.Key.Key_A.value <= key <= Qt.Key.Key_Z.value:
        # event.text() is a control character while Ctrl is held
        name = chr(key).lower()
    else:
        name = event.text()

    if not name:
        return None
    return KeyChord(
        key=name,
        ctrl=bool(mods & Qt.KeyboardModifier.ControlModifier),
        meta=bool(mods & Qt.KeyboardModifier.MetaModifier),
        shift=shift,
        alt=bool(mods & Qt.KeyboardModifier.AltModifier),
    )
