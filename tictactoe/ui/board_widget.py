from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRect
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from .. import config
from ..enums import Cell, Outcome


def cell_at(x, y, width, height, size=3):
    """
    map a point to (row, col) of the centred square grid, None if outside
    """
    side = min(width, height)
    if side <= 0:
        return None
    ox, oy = (width - side) / 2, (height - side) / 2
    if not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / size
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp float rounding at the far edge
    row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
    return row, col


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game, parent=None):
        super().__init__(parent)
        self.game = game  # read-only view of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winner
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        board = self.game.board
        w, h = self.width(), self.height()
        side = min(w, h)
        offset_x, offset_y = (w-side)/2, (h-side)/2
        # background
        painter.fillRect(self.rect(), QColor(config.BOARD_BACKGROUND))
        size = board.board_size
        cell_size = side / size
        # grid lines
        painter.setPen(QPen(QColor(config.GRID_LINE_COLOR), 2))
        for i in range(1, size):
            x = offset_x + i*cell_size
            painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
            y = offset_y + i*cell_size
            painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
        # draw marks
        for r in range(size):
            for c in range(size):
                mark = board.get_value(r, c)
                if mark is Cell.EMPTY: continue
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if mark is Cell.X:
                    painter.setPen(QPen(QColor(config.X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(config.O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        # if someone won, draw winner in center
        outcome = self.game.get_winner()
        if outcome in (Outcome.X, Outcome.O):
            font = QFont("Arial", max(1, int(side*0.6)), QFont.Bold)
            painter.setFont(font)
            color = QColor(config.X_COLOR if outcome is Outcome.X else config.O_COLOR)
            painter.setPen(QPen(color, 10, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
            rect = QRect(int(offset_x), int(offset_y), int(side), int(side))
            painter.drawText(rect, Qt.AlignCenter, outcome.value)
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game.is_game_over():
            return
        pos = event.position()
        hit = cell_at(pos.x(), pos.y(), self.width(), self.height(),
                      self.game.board.board_size)
        if hit is None:
            return
        self.cell_clicked.emit(*hit)  # notify main window
