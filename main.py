"""Character Counter — entry point.

Run with:
    python main.py
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

# Configure logging before any app imports
_level = logging.DEBUG if os.environ.get("CHARCOUNTER_DEBUG") == "1" else logging.INFO
logging.basicConfig(
    level=_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


def main() -> int:
    app = QApplication(sys.argv)
    app.setApplicationName("Character Counter")
    app.setOrganizationName("CharacterCounter")
    app.setStyle("Fusion")

    from app.window import MainWindow
    window = MainWindow()
    window.show()

    logger.info("Character Counter started.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
