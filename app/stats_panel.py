"""Statistic cards and the letter-density list."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from app.theme import CARD_COLOURS
from core.stats_engine import LetterStat


class StatCard(QFrame):
    """Large number with a caption underneath."""

    def __init__(self, caption: str, colour_key: str, parent=None) -> None:
        super().__init__(parent)
        bg, fg = CARD_COLOURS[colour_key]
        self.setStyleSheet(f"StatCard {{ background-color: {bg}; border-radius: 8px; }}"
                           f"QLabel {{ color: {fg}; }}")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 16, 12, 16)

        self._value = QLabel("0")
        self._value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._value.setStyleSheet("font-size: 40px; font-weight: 300;")
        layout.addWidget(self._value)

        self._caption = QLabel(caption)
        self._caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._caption)
        self.setAccessibleName(caption)

    def set_value(self, value: int) -> None:
        self._value.setText(str(value))
        self.setAccessibleDescription(f"{value} {self._caption.text()}")


class LetterDensityPanel(QFrame):
    """Letter rows with progress bars, collapsed to the top few by default.

    Signals:
        toggle_requested: "Show All"/"Show Less" or "See more" was clicked.
    """

    toggle_requested = pyqtSignal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 12)

        header = QHBoxLayout()
        title = QLabel("Letter Density")
        title.setStyleSheet("font-size: 15px; font-weight: bold; color: darkgrey;")
        header.addWidget(title)
        header.addStretch()
        self.toggle_btn = QPushButton("Show All")
        self.toggle_btn.setToolTip("Ctrl/Cmd + M")
        self.toggle_btn.clicked.connect(self.toggle_requested)
        header.addWidget(self.toggle_btn)
        layout.addLayout(header)

        self._rows = QVBoxLayout()
        self._rows.setSpacing(6)
        layout.addLayout(self._rows)

        self._empty_label = QLabel("No letters found. Start typing to see letter density.")
        self._empty_label.setStyleSheet("color: gray;")
        layout.addWidget(self._empty_label)

        self.see_more_btn = QPushButton("See more")
        self.see_more_btn.setFlat(True)
        self.see_more_btn.setStyleSheet("text-align: left; text-decoration: underline;")
        self.see_more_btn.setAccessibleName("See more letters")
        self.see_more_btn.clicked.connect(self.toggle_requested)
        layout.addWidget(self.see_more_btn, alignment=Qt.AlignmentFlag.AlignLeft)

    def set_letters(self, letters: tuple[LetterStat, ...], show_all: bool, has_more: bool) -> None:
        while self._rows.count():
            item = self._rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        for stat in letters:
            self._rows.addWidget(self._make_row(stat))

        self._empty_label.setVisible(not letters)
        self.see_more_btn.setVisible(has_more)
        self.toggle_btn.setText("Show Less" if show_all else "Show All")
        self.toggle_btn.setAccessibleName("Show less letters" if show_all else "Show all letters")

    def _make_row(self, stat: LetterStat) -> QWidget:
        row = QWidget()
        rl = QVBoxLayout(row)
        rl.setContentsMargins(0, 0, 0, 0)
        rl.setSpacing(2)

        labels = QHBoxLayout()
        labels.addWidget(QLabel(stat.letter.upper()))
        labels.addStretch()
        labels.addWidget(QLabel(f"{stat.count} ({stat.percentage})"))
        rl.addLayout(labels)

        bar = QProgressBar()
        bar.setRange(0, 10000)
        bar.setValue(round(float(stat.percentage.rstrip("%")) * 100))
        bar.setTextVisible(False)
        bar.setFixedHeight(8)
        bar.setAccessibleName(
            f"Letter {stat.letter}: {stat.count} occurrences, {stat.percentage} of text"
        )
        rl.addWidget(bar)
        return row
