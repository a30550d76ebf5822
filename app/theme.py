"""Application theme helpers — light and dark Fusion palettes plus card colours."""

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from core.controller import Theme

# Stat card backgrounds (characters / words / sentences)
CARD_COLOURS = {
    "chars": ("#0d6efd", "#ffffff"),
    "words": ("#ffc107", "#212529"),
    "sentences": ("#dc3545", "#ffffff"),
}

_DARK_EXTRA = """
QFrame#overlayScrim { background-color: rgba(0, 0, 0, 150); }
QFrame#overlayCard { background-color: #262626; border: 1px solid #444; border-radius: 8px; }
QLabel#limitWarning { background-color: #664d03; color: #ffe69c; padding: 6px; border-radius: 4px; }
"""

_LIGHT_EXTRA = """
QFrame#overlayScrim { background-color: rgba(0, 0, 0, 90); }
QFrame#overlayCard { background-color: #ffffff; border: 1px solid #ccc; border-radius: 8px; }
QLabel#limitWarning { background-color: #fff3cd; color: #664d03; padding: 6px; border-radius: 4px; }
"""


def apply_dark(app: QApplication) -> None:
    p = QPalette()
    p.setColor(QPalette.ColorRole.Window,          QColor(33,  37,  41))
    p.setColor(QPalette.ColorRole.WindowText,      QColor(222, 226, 230))
    p.setColor(QPalette.ColorRole.Base,            QColor(24,  26,  29))
    p.setColor(QPalette.ColorRole.AlternateBase,   QColor(44,  48,  52))
    p.setColor(QPalette.ColorRole.ToolTipBase,     QColor(24,  26,  29))
    p.setColor(QPalette.ColorRole.ToolTipText,     QColor(222, 226, 230))
    p.setColor(QPalette.ColorRole.Text,            QColor(222, 226, 230))
    p.setColor(QPalette.ColorRole.Button,          QColor(52,  58,  64))
    p.setColor(QPalette.ColorRole.ButtonText,      QColor(222, 226, 230))
    p.setColor(QPalette.ColorRole.BrightText,      QColor(255, 100, 100))
    p.setColor(QPalette.ColorRole.Link,            QColor(110, 168, 254))
    p.setColor(QPalette.ColorRole.Highlight,       QColor(13,  110, 253))
    p.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))
    p.setColor(QPalette.ColorRole.PlaceholderText, QColor(134, 142, 150))
    p.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text,       QColor(100, 100, 100))
    p.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(100, 100, 100))
    app.setPalette(p)
    app.setStyleSheet(_DARK_EXTRA)


def apply_light(app: QApplication) -> None:
    app.setPalette(app.style().standardPalette())
    app.setStyleSheet(_LIGHT_EXTRA)


def apply_theme(app: QApplication, theme: Theme) -> None:
    if theme is Theme.DARK:
        apply_dark(app)
    else:
        apply_light(app)
