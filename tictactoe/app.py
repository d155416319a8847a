import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from . import config
from .ui.main_window import TicTacToeWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

DARK_ROLES = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}

DISABLED_TEXT = QColor(127, 127, 127)


def apply_dark_palette(app: QApplication):
    """
    Dark Fusion look for every window of the app.
    """
    palette = QPalette()
    for role, color in DARK_ROLES.items():
        palette.setColor(role, color)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    window = TicTacToeWindow()
    window.show()
    logger.info("Tic Tac Toe started")
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
