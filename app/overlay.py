"""Keyboard-shortcuts help overlay.

A scrim laid over the main window's central widget rather than a
QDialog, so focus confinement is done by the controller's focus trap.
"""

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.shortcuts import Shortcut


class ShortcutsOverlay(QFrame):
    """Modal-looking card listing every keyboard shortcut.

    Signals:
        close_requested: The close button was activated.
    """

    close_requested = pyqtSignal()

    def __init__(self, shortcuts: list[Shortcut], parent: QWidget) -> None:
        super().__init__(parent)
        self.setObjectName("overlayScrim")
        self.setAccessibleName("Keyboard Shortcuts")
        self._build_ui(shortcuts)
        parent.installEventFilter(self)
        self.hide()

    def _build_ui(self, shortcuts: list[Shortcut]) -> None:
        outer = QVBoxLayout(self)
        outer.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame()
        card.setObjectName("overlayCard")
        card.setMinimumWidth(520)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 12, 16, 16)

        header = QHBoxLayout()
        title = QLabel("Keyboard Shortcuts")
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        self.close_btn = QPushButton("✕")
        self.close_btn.setFixedWidth(32)
        self.close_btn.setAccessibleName("Close keyboard shortcuts")
        self.close_btn.setToolTip("Close (Esc)")
        self.close_btn.clicked.connect(self.close_requested)
        header.addWidget(self.close_btn)
        layout.addLayout(header)

        self.table = QTableWidget(len(shortcuts), 2)
        self.table.setHorizontalHeaderLabels(["Shortcut", "Description"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setTabKeyNavigation(False)
        self.table.horizontalHeader().setSectionResizeMode(
            0, QHeaderView.ResizeMode.ResizeToContents
        )
        self.table.horizontalHeader().setStretchLastSection(True)
        for row, sc in enumerate(shortcuts):
            self.table.setItem(row, 0, QTableWidgetItem(sc.label))
            self.table.setItem(row, 1, QTableWidgetItem(sc.description))
        self.table.setMinimumHeight(self.table.rowHeight(0) * (len(shortcuts) + 1) + 8)
        layout.addWidget(self.table)

        outer.addWidget(card)

    def show_over_parent(self) -> None:
        self.setGeometry(self.parentWidget().rect())
        self.show()
        self.raise_()

    def eventFilter(self, obj, event) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self.setGeometry(obj.rect())
        return super().eventFilter(obj, event)
