"""Main application window for Character Counter."""

import logging
from pathlib import Path

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from app.host import (
    EditorSelectionQuery,
    QtClipboard,
    QtScheduler,
    WidgetFocusQuery,
    chord_from_event,
)
from app.overlay import ShortcutsOverlay
from app.stats_panel import LetterDensityPanel, StatCard
from app.theme import apply_theme
from config.settings import AppSettings
from core.controller import (
    CHAR_LIMIT_INPUT,
    OVERLAY_CLOSE,
    SAMPLE_TEXT,
    SHORTCUTS_BUTTON,
    TEXT_INPUT,
    Change,
    InteractionController,
    Theme,
    parse_char_limit,
)
from core.file_handler import FileHandlerError, read_file
from core.report import write_report
from core.shortcuts import SHORTCUTS

logger = logging.getLogger(__name__)

_COPY_ICON = "📋"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self._settings = AppSettings()
        self._applied_theme: Theme | None = None

        self.setWindowTitle("Character Counter")
        self.resize(900, 820)
        self._build_ui()

        scheduler = QtScheduler(self)
        focus = WidgetFocusQuery(
            self._overlay,
            {
                TEXT_INPUT: self._editor,
                CHAR_LIMIT_INPUT: self._limit_input,
                OVERLAY_CLOSE: self._overlay.close_btn,
                SHORTCUTS_BUTTON: self._shortcuts_btn,
            },
        )
        self._controller = InteractionController(
            scheduler,
            focus,
            EditorSelectionQuery(self._editor),
            QtClipboard(QApplication.clipboard(), scheduler),
            text=SAMPLE_TEXT,
            theme=Theme(self._settings.start_theme),
            words_per_minute=self._settings.words_per_minute,
            default_char_limit=self._settings.default_char_limit,
            top_letters=self._settings.top_letters,
            copy_feedback_ms=self._settings.copy_feedback_ms,
            focus_delay_ms=self._settings.focus_delay_ms,
            overlay_focus_delay_ms=self._settings.overlay_focus_delay_ms,
            on_change=self._on_controller_change,
        )

        self._editor.setPlainText(self._controller.text)
        self._editor.textChanged.connect(self._on_editor_changed)
        for change in Change:
            self._on_controller_change(change)

        QApplication.instance().installEventFilter(self)
        self._restore_geometry()
        self._editor.setFocus()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 12, 16, 12)
        root.setSpacing(10)

        root.addWidget(self._build_header())

        headline = QLabel("Analyze your text\nin real-time.")
        headline.setAlignment(Qt.AlignmentFlag.AlignCenter)
        headline.setStyleSheet("font-size: 28px; font-weight: bold;")
        root.addWidget(headline)

        root.addWidget(self._build_input_area())
        root.addWidget(self._build_cards())

        self._letters = LetterDensityPanel()
        self._letters.toggle_requested.connect(lambda: self._controller.toggle_show_all_letters())
        root.addWidget(self._letters, stretch=1)

        self.setStatusBar(QStatusBar())

        self._overlay = ShortcutsOverlay(SHORTCUTS, central)
        self._overlay.close_requested.connect(lambda: self._controller.close_shortcuts_overlay())

        open_sc = QShortcut(QKeySequence.StandardKey.Open, self)
        open_sc.activated.connect(self._on_open_file)

    def _build_header(self) -> QWidget:
        bar = QWidget()
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(0, 0, 0, 0)

        logo = QLabel("📊  Character Counter")
        logo.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(logo)
        layout.addStretch()

        open_btn = QPushButton("Open File…")
        open_btn.setToolTip("Load .txt, .md or .docx into the editor (Ctrl+O)")
        open_btn.clicked.connect(self._on_open_file)
        layout.addWidget(open_btn)

        export_btn = QPushButton("Export Report…")
        export_btn.setToolTip("Save the current statistics as Markdown")
        export_btn.clicked.connect(self._on_export_report)
        layout.addWidget(export_btn)

        self._copy_btn = QPushButton(_COPY_ICON)
        self._copy_btn.setMinimumWidth(40)
        self._copy_btn.setAccessibleName("Copy text")
        self._copy_btn.setToolTip("Copy text (Ctrl/Cmd + C)")
        self._copy_btn.clicked.connect(lambda: self._controller.copy_text_to_clipboard())
        layout.addWidget(self._copy_btn)

        clear_btn = QPushButton("🧹")
        clear_btn.setFixedWidth(40)
        clear_btn.setAccessibleName("Clear text")
        clear_btn.setToolTip("Clear text (Ctrl/Cmd + X)")
        clear_btn.clicked.connect(lambda: self._controller.clear_text())
        layout.addWidget(clear_btn)

        self._shortcuts_btn = QPushButton("⌨")
        self._shortcuts_btn.setFixedWidth(40)
        self._shortcuts_btn.setAccessibleName("Show keyboard shortcuts")
        self._shortcuts_btn.setToolTip("Keyboard shortcuts (Shift + ?)")
        self._shortcuts_btn.clicked.connect(
            lambda: self._controller.toggle_shortcuts_overlay(opener=self._shortcuts_btn)
        )
        layout.addWidget(self._shortcuts_btn)

        self._theme_btn = QPushButton()
        self._theme_btn.setFixedWidth(40)
        self._theme_btn.setAccessibleName("Toggle theme")
        self._theme_btn.setToolTip("Toggle theme (Ctrl/Cmd + L)")
        self._theme_btn.clicked.connect(lambda: self._controller.toggle_theme())
        layout.addWidget(self._theme_btn)

        return bar

    def _build_input_area(self) -> QWidget:
        box = QWidget()
        layout = QVBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)

        self._editor = QPlainTextEdit()
        self._editor.setPlaceholderText("Enter your text here...")
        self._editor.setAccessibleName("Text input for analysis")
        self._editor.setTabChangesFocus(True)
        self._editor.setMinimumHeight(130)
        layout.addWidget(self._editor)

        self._limit_warning = QLabel()
        self._limit_warning.setObjectName("limitWarning")
        self._limit_warning.hide()
        layout.addWidget(self._limit_warning)

        options = QHBoxLayout()
        self._exclude_cb = QCheckBox("Exclude Spaces")
        self._exclude_cb.setToolTip("Ctrl/Cmd + E")
        self._exclude_cb.setAccessibleName("Exclude spaces from character count")
        self._exclude_cb.clicked.connect(lambda: self._controller.toggle_exclude_spaces())
        options.addWidget(self._exclude_cb)

        self._limit_cb = QCheckBox("Set Character Limit")
        self._limit_cb.setToolTip("Ctrl/Cmd + ;")
        self._limit_cb.setAccessibleName("Set character limit")
        self._limit_cb.clicked.connect(lambda: self._controller.toggle_char_limit())
        options.addWidget(self._limit_cb)

        self._limit_input = QLineEdit()
        self._limit_input.setPlaceholderText("Limit")
        self._limit_input.setAccessibleName("Character limit")
        self._limit_input.setFixedWidth(90)
        self._limit_input.textEdited.connect(lambda t: self._controller.set_char_limit(t))
        options.addWidget(self._limit_input)
        self._limit_suffix = QLabel("chars")
        options.addWidget(self._limit_suffix)

        options.addStretch()
        self._reading_label = QLabel()
        options.addWidget(self._reading_label)
        layout.addLayout(options)
        return box

    def _build_cards(self) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        self._chars_card = StatCard("Total Characters", "chars")
        self._words_card = StatCard("Word Count", "words")
        self._sentences_card = StatCard("Sentence Count", "sentences")
        for card in (self._chars_card, self._words_card, self._sentences_card):
            layout.addWidget(card)
        return row

    # ------------------------------------------------------------------
    # Controller → widgets
    # ------------------------------------------------------------------

    def _on_controller_change(self, change: Change) -> None:
        if change is Change.TEXT:
            self._sync_editor()
        elif change is Change.STATS:
            self._render_stats()
        elif change is Change.CONFIG:
            self._render_config()
        elif change is Change.UI:
            self._render_ui()
        elif change is Change.FEEDBACK:
            feedback = self._controller.copy_feedback.value
            self._copy_btn.setText(feedback or _COPY_ICON)

    def _sync_editor(self) -> None:
        if self._editor.toPlainText() == self._controller.text:
            return
        self._editor.blockSignals(True)
        self._editor.setPlainText(self._controller.text)
        self._editor.blockSignals(False)

    def _render_stats(self) -> None:
        stats = self._controller.stats
        self._chars_card.set_value(stats.char_count)
        self._words_card.set_value(stats.word_count)
        self._sentences_card.set_value(stats.sentence_count)
        self._reading_label.setText(f"Approx. reading time: {stats.reading_time}")

        if stats.exceeds_limit:
            self._limit_warning.setText(
                f"Your text exceeds the character limit of {self._controller.config.char_limit}!"
            )
        self._limit_warning.setVisible(stats.exceeds_limit)
        self._render_letters()

    def _render_config(self) -> None:
        ctl = self._controller
        self._exclude_cb.setChecked(ctl.config.exclude_spaces)
        self._limit_cb.setChecked(ctl.char_limit_enabled)
        self._limit_input.setVisible(ctl.char_limit_enabled)
        self._limit_suffix.setVisible(ctl.char_limit_enabled)
        # Leave the user's partial input alone while it still means the same limit.
        if parse_char_limit(self._limit_input.text()) != ctl.char_limit_value:
            value = ctl.char_limit_value
            self._limit_input.setText("" if value is None else str(value))

    def _render_ui(self) -> None:
        ui = self._controller.ui
        if ui.theme is not self._applied_theme:
            apply_theme(QApplication.instance(), ui.theme)
            self._applied_theme = ui.theme
            self._theme_btn.setText("☀️" if ui.theme is Theme.DARK else "🌙")

        self._render_letters()

        if ui.shortcuts_modal_open and not self._overlay.isVisible():
            self._overlay.show_over_parent()
        elif not ui.shortcuts_modal_open and self._overlay.isVisible():
            self._overlay.hide()

    def _render_letters(self) -> None:
        ctl = self._controller
        self._letters.set_letters(
            ctl.displayed_letters, ctl.ui.show_all_letters, ctl.has_more_letters
        )

    # ------------------------------------------------------------------
    # Widgets → controller
    # ------------------------------------------------------------------

    def _on_editor_changed(self) -> None:
        self._controller.set_text(self._editor.toPlainText())

    def eventFilter(self, obj, event) -> bool:
        if (
            event.type() == QEvent.Type.KeyPress
            and self.isActiveWindow()
            and isinstance(obj, QWidget)
            and obj.window() is self
        ):
            chord = chord_from_event(event)
            if chord is not None and self._controller.handle_key(chord):
                return True
        return super().eventFilter(obj, event)

    # ------------------------------------------------------------------
    # File actions
    # ------------------------------------------------------------------

    def _on_open_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Document",
            str(self._settings.last_open_dir),
            "Documents (*.txt *.md *.docx);;All Files (*)",
        )
        if not path:
            return
        try:
            text = read_file(Path(path))
        except FileHandlerError as exc:
            logger.warning("Could not open %s: %s", path, exc)
            QMessageBox.warning(self, "Open Failed", str(exc))
            return
        self._settings.last_open_dir = Path(path).parent
        self._editor.setPlainText(text)
        self.statusBar().showMessage(f"Loaded {Path(path).name}", 4000)

    def _on_export_report(self) -> None:
        default = self._settings.last_open_dir / "statistics.md"
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Statistics", str(default), "Markdown (*.md)"
        )
        if not path:
            return
        try:
            write_report(self._controller.stats, self._controller.config, Path(path))
        except FileHandlerError as exc:
            logger.warning("Report export failed: %s", exc)
            QMessageBox.warning(self, "Export Failed", str(exc))
            return
        self.statusBar().showMessage(f"Report saved to {path}", 4000)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _restore_geometry(self) -> None:
        geom = self._settings.window_geometry
        if geom:
            self.restoreGeometry(geom)

    def closeEvent(self, event) -> None:
        QApplication.instance().removeEventFilter(self)
        self._controller.teardown()
        self._settings.window_geometry = bytes(self.saveGeometry())
        self._settings.sync()
        super().closeEvent(event)
