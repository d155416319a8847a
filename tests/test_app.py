from PySide6.QtGui import QColor, QPalette

from tictactoe import app


def test_dark_palette_applied(qt_app):
    app.apply_dark_palette(qt_app)
    palette = qt_app.palette()
    assert palette.color(QPalette.Window) == QColor(53, 53, 53)
    assert palette.color(QPalette.Disabled, QPalette.Text) == app.DISABLED_TEXT
